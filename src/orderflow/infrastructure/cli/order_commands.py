"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from orderflow.application.create_order import CreateOrderHandler
from orderflow.application.delete_order import DeleteOrderHandler
from orderflow.application.dto import NewOrder, OrderDTO, OrderItemSpec
from orderflow.application.list_account_orders import ListAccountOrdersHandler
from orderflow.application.replace_order_lines import ReplaceOrderLinesHandler
from orderflow.application.search_orders import DEFAULT_PAGE_SIZE, SearchOrdersHandler
from orderflow.application.show_order import ShowOrderHandler
from orderflow.application.update_order import UpdateOrderHandler
from orderflow.application.update_order_status import UpdateOrderStatusHandler
from orderflow.domain.exceptions import DomainException
from orderflow.domain.model.order import OrderUpdate
from orderflow.infrastructure.bootstrap import (
    account_repository,
    coupon_repository,
    order_repository,
    product_repository,
    status_engine,
)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '1:3,2:5' (product ID:quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_str, qty_str = pair.rsplit(":", 1)
        try:
            product_id = int(product_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Product ID and quantity must be integers."
            )
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    state = "" if dto.active else ", deleted"
    click.echo(f"Order #{dto.id}  (status={dto.status}{state})")
    click.echo(f"Account:  {dto.account_id}  {dto.full_name}".rstrip())
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Shipping: {dto.shipping_date or '-'} {dto.shipping_method}".rstrip())
    if dto.payment_reference:
        click.echo(f"Payment:  {dto.payment_method} ref={dto.payment_reference}")
    if dto.coupon_code:
        click.echo(f"Coupon:   {dto.coupon_code}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


def _display_summary(dtos: list[OrderDTO]) -> None:
    click.echo(f"{'ID':<6} {'Status':<12} {'Name':<20} {'Total':>12}")
    click.echo("-" * 53)
    for dto in dtos:
        click.echo(f"{dto.id:<6} {dto.status:<12} {dto.full_name:<20} {dto.total:>12}")


@click.command("create")
@click.option("--account", "account_id", required=True, type=int, help="Owning account ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--full-name", default="", help="Recipient full name.")
@click.option("--email", default="", help="Recipient email.")
@click.option("--phone", "phone_number", default="", help="Recipient phone number.")
@click.option("--address", default="", help="Recipient address.")
@click.option("--note", default="", help="Free-text note.")
@click.option("--shipping-method", default="", help="Shipping method.")
@click.option("--shipping-address", default="", help="Shipping address.")
@click.option("--shipping-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Shipping date (YYYY-MM-DD), defaults to today.")
@click.option("--payment-method", default="", help="Payment method.")
@click.option("--payment-ref", "payment_reference", default=None, help="Payment gateway reference.")
@click.option("--coupon", "coupon_code", default=None, help="Coupon code.")
def order_create(account_id: int, items: str, shipping_date, **details) -> None:
    """Create a new order from a cart."""
    request = NewOrder(
        account_id=account_id,
        items=_parse_items(items),
        shipping_date=shipping_date.date() if shipping_date else None,
        **details,
    )
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        account_repo=account_repository(),
        product_repo=product_repository(),
        coupon_repo=coupon_repository(),
    )

    try:
        dto = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created  (status={dto.status})")
    _display_order(dto)


@click.command("show")
@click.option("--id", "identifier", required=True, help="Order ID or payment reference.")
def order_show(identifier: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(identifier)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("update")
@click.option("--id", "identifier", required=True, help="Order ID or payment reference.")
@click.option("--account", "account_id", type=int, default=None, help="New owning account ID.")
@click.option("--full-name", default=None)
@click.option("--email", default=None)
@click.option("--phone", "phone_number", default=None)
@click.option("--address", default=None)
@click.option("--note", default=None)
@click.option("--shipping-method", default=None)
@click.option("--shipping-address", default=None)
@click.option("--shipping-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
@click.option("--payment-method", default=None)
def order_update(identifier: str, shipping_date, **fields) -> None:
    """Update selected fields of an order; omitted fields are kept."""
    update = OrderUpdate(
        shipping_date=shipping_date.date() if shipping_date else None,
        **fields,
    )
    handler = UpdateOrderHandler(
        order_repo=order_repository(),
        account_repo=account_repository(),
    )

    try:
        dto = handler.handle(identifier, update)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} updated.")


@click.command("status")
@click.option("--id", "identifier", required=True, help="Order ID or payment reference.")
@click.option("--to", "status", required=True, help="Target status, e.g. PROCESSING.")
def order_status(identifier: str, status: str) -> None:
    """Move an order to another status."""
    handler = UpdateOrderStatusHandler(
        order_repo=order_repository(),
        engine=status_engine(),
    )

    try:
        dto = handler.handle(identifier, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("delete")
@click.option("--id", "identifier", required=True, help="Order ID or payment reference.")
def order_delete(identifier: str) -> None:
    """Soft-delete an order (it stays stored but inactive)."""
    handler = DeleteOrderHandler(order_repo=order_repository())
    handler.handle(identifier)
    click.echo(f"Order '{identifier}' deleted.")


@click.command("list")
@click.option("--account", "account_id", required=True, type=int, help="Account ID.")
@click.option("--all", "include_inactive", is_flag=True, default=False,
              help="Include deleted orders.")
def order_list(account_id: int, include_inactive: bool) -> None:
    """List the orders of an account."""
    handler = ListAccountOrdersHandler(order_repo=order_repository())
    dtos = handler.handle(account_id, include_inactive=include_inactive)

    if not dtos:
        click.echo("No orders found.")
        return
    _display_summary(dtos)


@click.command("search")
@click.option("--keyword", default="", help="Text to look for in name, email, phone, address, note.")
@click.option("--page", default=0, type=int, help="Zero-based page index.")
@click.option("--size", default=DEFAULT_PAGE_SIZE, type=int, help="Page size.")
def order_search(keyword: str, page: int, size: int) -> None:
    """Search active orders by keyword."""
    handler = SearchOrdersHandler(order_repo=order_repository())

    try:
        result = handler.handle(keyword, page=page, size=size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No orders found.")
        return
    _display_summary(result.items)
    click.echo(
        f"Page {result.page + 1}/{result.total_pages}  ({result.total_items} orders)"
    )


@click.command("replace-lines")
@click.option("--id", "identifier", required=True, help="Order ID or payment reference.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_replace_lines(identifier: str, items: str) -> None:
    """Replace every line of a PENDING order."""
    specs = _parse_items(items)
    handler = ReplaceOrderLinesHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(identifier, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
