from __future__ import annotations

from craftstore.domain.cart import Cart, CartLine, CartTotals
from craftstore.entrypoints.http.dtos.cart import (
    AddCartItemRequestDTO,
    CartItemResponseDTO,
    CartResponseDTO,
    CartTotalsResponseDTO,
    CartWithItemsResponseDTO,
)
from craftstore.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from craftstore.use_cases.add_cart_item import AddCartItemRequest
from craftstore.use_cases.cart_view import CartView


class CartMapper:
    """Maps between REST DTOs and domain models for carts."""

    @staticmethod
    def to_add_item_request(dto: AddCartItemRequestDTO) -> AddCartItemRequest:
        return AddCartItemRequest(
            cart_id=dto.cart_id,
            product_id=dto.product_id,
            quantity=dto.quantity,
            customizations=dict(dto.customizations),
        )

    @staticmethod
    def to_cart_response(cart: Cart) -> CartResponseDTO:
        return CartResponseDTO(
            id=cart.id,
            user_id=cart.user_id,
            created_at=cart.created_at,
            updated_at=cart.updated_at,
        )

    @staticmethod
    def to_item_response(line: CartLine) -> CartItemResponseDTO:
        """Flattens the item and nests its product (None if unresolved)."""
        item = line.item
        return CartItemResponseDTO(
            id=item.id,
            cart_id=item.cart_id,
            product_id=item.product_id,
            quantity=item.quantity,
            customizations=dict(item.customizations),
            customization_label=line.customization_label,
            line_total=str(line.line_total),
            product=CatalogMapper.to_product_response(line.product) if line.product else None,
        )

    @staticmethod
    def to_totals_response(totals: CartTotals) -> CartTotalsResponseDTO:
        return CartTotalsResponseDTO(
            subtotal=str(totals.subtotal),
            item_count=totals.item_count,
            shipping=str(totals.shipping),
            total=str(totals.total),
        )

    @staticmethod
    def to_cart_view_response(view: CartView) -> CartWithItemsResponseDTO:
        return CartWithItemsResponseDTO(
            id=view.cart.id,
            user_id=view.cart.user_id,
            created_at=view.cart.created_at,
            updated_at=view.cart.updated_at,
            items=[CartMapper.to_item_response(line) for line in view.lines],
            totals=CartMapper.to_totals_response(view.totals),
        )
