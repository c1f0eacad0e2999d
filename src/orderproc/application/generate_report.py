"""Application service: Generate Report use case (query).

Builds a read-only snapshot of an order and renders it as text. Nothing
on the order is modified, so reporting the same order twice without
changes in between yields the same text.
"""

from __future__ import annotations

from orderproc.application.dto import OrderLineItemDTO, OrderReportDTO, StatusChangeDTO
from orderproc.domain.exceptions import EntityNotFoundError
from orderproc.domain.model.order import Order
from orderproc.domain.repository.order_repository import OrderRepository

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"
RULE = "-" * 60


class GenerateReportHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> str:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return render_report(to_report_dto(order))


def to_report_dto(order: Order) -> OrderReportDTO:
    return OrderReportDTO(
        id=order.id,
        customer_name=order.customer.name,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_name=item.product.name,
                quantity=item.quantity.value,
                unit_price=str(item.product.price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        history=[
            StatusChangeDTO(
                changed_at=change.changed_at.strftime(TIMESTAMP_FORMAT),
                old_status=change.old_status.value,
                new_status=change.new_status.value,
            )
            for change in order.history
        ],
    )


def render_report(dto: OrderReportDTO) -> str:
    lines = [
        RULE,
        f"Order ID   : {dto.id}",
        f"Customer   : {dto.customer_name}",
        f"Status     : {dto.status}",
        "Items:",
    ]

    if dto.items:
        lines.append(f"  {'Product':<20} {'Qty':>5} {'Price':>15} {'Total':>15}")
        for item in dto.items:
            lines.append(
                f"  {item.product_name:<20} {item.quantity:>5} "
                f"{item.unit_price:>15} {item.line_total:>15}"
            )
    else:
        lines.append("  (no items)")

    lines.append(f"Total      : {dto.total}")
    lines.append("Status History:")

    if dto.history:
        for change in dto.history:
            lines.append(
                f"  {change.changed_at} : {change.old_status} -> {change.new_status}"
            )
    else:
        lines.append("  (no status changes)")

    lines.append(RULE)
    return "\n".join(lines)
