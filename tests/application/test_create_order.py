"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no file I/O.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from orderflow.application.create_order import CreateOrderHandler, local_now
from orderflow.application.dto import NewOrder, OrderItemSpec
from orderflow.domain.exceptions import (
    AccountNotFoundError,
    CouponNotFoundError,
    EntityNotFoundError,
    InactiveCouponError,
    InvalidShippingDateError,
    ProductNotFoundError,
    ValidationError,
)
from orderflow.domain.model.account import Account
from orderflow.domain.model.coupon import Coupon
from orderflow.domain.model.order import OrderStatus, order_total
from orderflow.domain.model.product import Product
from orderflow.domain.model.value_objects import Money
from tests.fakes import (
    FakeAccountRepository,
    FakeCouponRepository,
    FakeOrderRepository,
    FakeProductRepository,
)

NOW = datetime(2030, 6, 10, 14, 0, tzinfo=timezone.utc)
TODAY = NOW.date()


def _setup():
    """Build handler with fake repos pre-loaded with an account, products and coupons."""
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository([
        Product(id=1, name="Widget", price=Money.of("10.0")),
        Product(id=2, name="Gadget", price=Money.of("5.0")),
        Product(id=3, name="Gizmo", price=Money.of("0.10")),
    ])
    handler = CreateOrderHandler(
        order_repo=order_repo,
        account_repo=FakeAccountRepository([Account(id=7, full_name="Alice Smith")]),
        product_repo=product_repo,
        coupon_repo=FakeCouponRepository([
            Coupon(id=1, code="SUMMER", active=True),
            Coupon(id=2, code="WINTER", active=False),
        ]),
        clock=lambda: NOW,
    )
    return handler, order_repo, product_repo


def _request(**overrides) -> NewOrder:
    fields = dict(
        account_id=7,
        items=[OrderItemSpec(1, 2), OrderItemSpec(2, 1)],
        full_name="Alice Smith",
        email="alice@example.com",
        address="1 Main St",
    )
    fields.update(overrides)
    return NewOrder(**fields)


class TestCreateOrderHappyPath:

    def test_cart_example_total(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle(_request())

        assert dto.total == "$25.00"
        assert [item.line_total for item in dto.items] == ["$20.00", "$5.00"]

        saved = order_repo.get_by_id(dto.id)
        assert saved.total_money == Money.of("25.0")
        assert [line.line_total for line in saved.lines] == [Money.of("20.0"), Money.of("5.0")]

    def test_total_equals_sum_of_lines(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle(_request(items=[OrderItemSpec(3, 7), OrderItemSpec(1, 3), OrderItemSpec(3, 3)]))
        saved = order_repo.get_by_id(dto.id)
        assert saved.total_money == order_total(saved.lines)
        assert saved.total_money == Money.of("31.00")

    def test_initial_state(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle(_request())
        assert dto.status == "PENDING"
        assert dto.active is True
        saved = order_repo.get_by_id(dto.id)
        assert saved.status == OrderStatus.PENDING
        assert saved.created_at == NOW

    def test_lines_bound_to_order(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle(_request())
        saved = order_repo.get_by_id(dto.id)
        assert all(line.order_id == dto.id for line in saved.lines)

    def test_sequential_ids(self):
        handler, _, _ = _setup()
        dto1 = handler.handle(_request())
        dto2 = handler.handle(_request())
        assert dto2.id == dto1.id + 1

    def test_single_write_per_order(self):
        handler, order_repo, _ = _setup()
        handler.handle(_request())
        assert order_repo.save_count == 1


class TestCreateOrderShippingDate:

    def test_defaults_to_today(self):
        handler, _, _ = _setup()
        dto = handler.handle(_request())
        assert dto.shipping_date == TODAY.isoformat()

    def test_explicit_today_accepted(self):
        handler, _, _ = _setup()
        dto = handler.handle(_request(shipping_date=TODAY))
        assert dto.shipping_date == TODAY.isoformat()

    def test_future_date_kept(self):
        handler, _, _ = _setup()
        dto = handler.handle(_request(shipping_date=date(2030, 7, 1)))
        assert dto.shipping_date == "2030-07-01"

    @pytest.mark.parametrize("overrides", [{}, {"coupon_code": "SUMMER"}, {"full_name": ""}])
    def test_past_date_rejected_regardless_of_other_fields(self, overrides):
        handler, order_repo, _ = _setup()
        with pytest.raises(InvalidShippingDateError):
            handler.handle(_request(shipping_date=date(2030, 6, 9), **overrides))
        assert order_repo.all() == []

    def test_past_date_is_validation_error(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle(_request(shipping_date=date(2020, 1, 1)))


class TestCreateOrderCoupon:

    def test_active_coupon_attached(self):
        handler, _, _ = _setup()
        dto = handler.handle(_request(coupon_code="SUMMER"))
        assert dto.coupon_code == "SUMMER"

    def test_no_coupon(self):
        handler, _, _ = _setup()
        dto = handler.handle(_request(coupon_code=None))
        assert dto.coupon_code is None

    def test_empty_coupon_code_means_no_coupon(self):
        handler, _, _ = _setup()
        dto = handler.handle(_request(coupon_code=""))
        assert dto.coupon_code is None

    def test_unknown_coupon_not_found(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(CouponNotFoundError):
            handler.handle(_request(coupon_code="BOGUS"))
        assert order_repo.all() == []

    def test_inactive_coupon_rejected(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(InactiveCouponError):
            handler.handle(_request(coupon_code="WINTER"))
        assert order_repo.all() == []


class TestCreateOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        handler, order_repo, product_repo = _setup()
        dto = handler.handle(_request(items=[OrderItemSpec(1, 1)]))

        product_repo.save(Product(id=1, name="Widget", price=Money.of("99.99")))

        saved = order_repo.get_by_id(dto.id)
        assert saved.lines[0].unit_price == Money.of("10.0")
        assert str(saved.total_money) == "$10.00"


class TestCreateOrderValidation:

    def test_unknown_account_rejected(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(AccountNotFoundError, match="Cannot find account with id: 99"):
            handler.handle(_request(account_id=99))
        assert order_repo.all() == []

    def test_missing_product_mid_cart_leaves_nothing(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ProductNotFoundError):
            handler.handle(_request(items=[OrderItemSpec(1, 1), OrderItemSpec(404, 1), OrderItemSpec(2, 1)]))
        assert order_repo.all() == []
        assert order_repo.save_count == 0

    def test_not_found_errors_share_a_base(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle(_request(items=[OrderItemSpec(404, 1)]))

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity_rejected(self, qty):
        handler, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(_request(items=[OrderItemSpec(1, qty)]))
        assert order_repo.all() == []

    def test_empty_cart_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle(_request(items=[]))


class TestCreateOrderLocalCalendarDay:
    """The shipping-date rule follows the server's local day, not UTC."""

    def _handler(self, clock):
        return CreateOrderHandler(
            order_repo=FakeOrderRepository(),
            account_repo=FakeAccountRepository([Account(id=7, full_name="Alice Smith")]),
            product_repo=FakeProductRepository([Product(id=1, name="Widget", price=Money.of("10.0"))]),
            coupon_repo=FakeCouponRepository(),
            clock=clock,
        )

    def test_ahead_of_utc_just_after_midnight(self):
        # 00:30 on June 10 at UTC+14 is still June 9 in UTC
        now = datetime(2030, 6, 10, 0, 30, tzinfo=timezone(timedelta(hours=14)))
        handler = self._handler(lambda: now)

        with pytest.raises(InvalidShippingDateError):
            handler.handle(_request(items=[OrderItemSpec(1, 1)], shipping_date=date(2030, 6, 9)))

        dto = handler.handle(_request(items=[OrderItemSpec(1, 1)]))
        assert dto.shipping_date == "2030-06-10"
        assert dto.created_at == "2030-06-09 10:30 UTC"

    def test_behind_utc_just_before_midnight(self):
        # 23:30 on June 10 at UTC-10 is already June 11 in UTC
        now = datetime(2030, 6, 10, 23, 30, tzinfo=timezone(timedelta(hours=-10)))
        dto = self._handler(lambda: now).handle(
            _request(items=[OrderItemSpec(1, 1)], shipping_date=date(2030, 6, 10))
        )
        assert dto.shipping_date == "2030-06-10"
        assert dto.created_at == "2030-06-11 09:30 UTC"

    def test_default_clock_uses_local_date(self):
        dto = self._handler(local_now).handle(_request(items=[OrderItemSpec(1, 1)]))
        assert dto.shipping_date == date.today().isoformat()
