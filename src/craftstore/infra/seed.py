"""
Reference catalog for the storefront.

Features:
- Deterministic: same ids on every fresh store (types 1-5, categories 1-4, products 1-8)
- Idempotent: does nothing when the store already has categories
"""

from __future__ import annotations

import logging
from decimal import Decimal

from craftstore.ports.catalog_repository import (
    CatalogRepository,
    NewCategory,
    NewCustomizationType,
    NewProduct,
)

logger = logging.getLogger(__name__)

_IMAGE = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w={}&q=80"


def _image(photo: str, width: int = 400) -> str:
    return _IMAGE.format(photo, width)


# ==============================================================================
# Reference data
# ==============================================================================

CUSTOMIZATION_TYPES = [
    NewCustomizationType(name="engraving", display_name="Engraving", color_hex="#93c5fd"),
    NewCustomizationType(name="color_options", display_name="Color Options", color_hex="#bbf7d0"),
    NewCustomizationType(name="custom_size", display_name="Custom Size", color_hex="#d8b4fe"),
    NewCustomizationType(name="custom_config", display_name="Custom Config", color_hex="#fde68a"),
    NewCustomizationType(name="monogram", display_name="Monogram", color_hex="#93c5fd"),
]

CATEGORIES = [
    NewCategory(
        name="Leather Goods",
        description="Wallets, belts, bags & more",
        image=_image("1605020420620-20c943cc4669", 500),
        product_count=42,
    ),
    NewCategory(
        name="Ceramics",
        description="Mugs, plates, decor & art",
        image=_image("1528283648649-33347faa5d3e", 500),
        product_count=38,
    ),
    NewCategory(
        name="Woodcraft",
        description="Furniture, gifts & decor",
        image=_image("1610701596007-11502861dcfa", 500),
        product_count=51,
    ),
    NewCategory(
        name="Textiles",
        description="Accessories, decor & apparel",
        image=_image("1544457070-4cd773b4d71e", 500),
        product_count=29,
    ),
]


def _products(types: dict[str, int], categories: dict[str, int]) -> list[NewProduct]:
    return [
        NewProduct(
            name="Leather Journal",
            description=(
                "Our handcrafted leather journal is made from premium full-grain leather "
                "that develops a beautiful patina over time. The journal features 192 pages "
                "of acid-free paper and a binding that lays flat when open."
            ),
            short_description="Customizable cover & pages",
            price=Decimal("79.99"),
            category_id=categories["Leather Goods"],
            rating=4.9,
            image=_image("1602028915047-37269d1a73f7"),
            images=(
                _image("1602028915047-37269d1a73f7", 800),
                _image("1590333748338-d629e4564ad9", 800),
                _image("1544239605-4c4cc25aa55a", 800),
                _image("1544377570-7b7fed7d408e", 800),
            ),
            is_bestseller=True,
            customization_options=(types["engraving"], types["custom_size"]),
            features=(
                "Full-grain leather cover",
                "Refillable design",
                "192 acid-free pages (96 sheets)",
                "Lay-flat binding",
                "Inner pocket for loose papers",
                "Elastic closure",
            ),
        ),
        NewProduct(
            name="Ceramic Mug Set",
            description=(
                "Handcrafted ceramic mugs perfect for your morning coffee or tea. "
                "Each mug is carefully made and glazed by our skilled artisans."
            ),
            short_description="Set of 4, multiple glazes",
            price=Decimal("119.99"),
            category_id=categories["Ceramics"],
            rating=4.7,
            image=_image("1556760467-2a8243a7387f"),
            images=(_image("1556760467-2a8243a7387f", 800),),
            customization_options=(types["color_options"], types["monogram"]),
            features=(
                "Handcrafted ceramic",
                "Microwave and dishwasher safe",
                "12oz capacity",
                "Multiple glaze options",
                "Non-toxic materials",
            ),
        ),
        NewProduct(
            name="Wooden Desk Organizer",
            description=(
                "Keep your workspace tidy with this handcrafted wooden desk organizer. "
                "Features multiple compartments for all your office essentials."
            ),
            short_description="Modular design, oak finish",
            price=Decimal("149.99"),
            category_id=categories["Woodcraft"],
            rating=4.8,
            image=_image("1584917865442-de89df76afd3"),
            images=(_image("1584917865442-de89df76afd3", 800),),
            is_new=True,
            customization_options=(types["custom_config"], types["engraving"]),
            features=(
                "Solid oak construction",
                "Multiple compartments",
                "Modular design",
                "Felt-lined drawers",
                "Customizable layout",
            ),
        ),
        NewProduct(
            name="Textile Wall Hanging",
            description=(
                "Add texture and warmth to your space with this handwoven wall hanging. "
                "Made from natural fibers with a unique design."
            ),
            short_description="Handwoven, natural fibers",
            price=Decimal("199.99"),
            category_id=categories["Textiles"],
            rating=4.6,
            image=_image("1622560480654-d96214fdc887"),
            images=(_image("1622560480654-d96214fdc887", 800),),
            customization_options=(types["color_options"], types["custom_size"]),
            features=(
                "Handwoven design",
                "Natural fibers",
                "Wooden dowel included",
                "Multiple size options",
                "Customizable colors",
            ),
        ),
        NewProduct(
            name="Glass Pendant Light",
            description=(
                "Illuminate your space with our handblown glass pendant lights. "
                "Each piece is unique with subtle variations in color and form."
            ),
            short_description="Blown glass, multiple shapes",
            price=Decimal("249.99"),
            category_id=categories["Ceramics"],
            rating=4.9,
            image=_image("1600857544200-b2f666a9a2fc"),
            images=(_image("1600857544200-b2f666a9a2fc", 800),),
            customization_options=(types["color_options"], types["custom_config"]),
            features=(
                "Handblown glass",
                "E26 standard socket",
                "Adjustable cord length",
                "Multiple color options",
                "Custom shape options",
            ),
        ),
        NewProduct(
            name="Metal Card Holder",
            description=(
                "Keep your business cards organized and accessible with this sleek metal "
                "card holder. Available in brushed steel or brass finish."
            ),
            short_description="Brushed steel, brass options",
            price=Decimal("69.99"),
            category_id=categories["Leather Goods"],
            rating=4.7,
            image=_image("1584811644165-33db2e427a08"),
            images=(_image("1584811644165-33db2e427a08", 800),),
            is_bestseller=True,
            customization_options=(types["engraving"], types["color_options"]),
            features=(
                "Solid metal construction",
                "Holds up to 20 business cards",
                "Multiple finish options",
                "Non-slip base",
                "Optional engraving",
            ),
        ),
        NewProduct(
            name="Leather Portfolio",
            description=(
                "Carry your documents in style with this premium leather portfolio. "
                "Features multiple pockets and a notepad holder."
            ),
            short_description="Full-grain leather, A4 size",
            price=Decimal("179.99"),
            category_id=categories["Leather Goods"],
            rating=4.8,
            image=_image("1584589167171-541ce45f1eea"),
            images=(_image("1584589167171-541ce45f1eea", 800),),
            customization_options=(types["color_options"], types["monogram"]),
            features=(
                "Full-grain leather",
                "A4 size capacity",
                "Multiple document pockets",
                "Pen holder",
                "Included notepad",
                "Optional monogramming",
            ),
        ),
        NewProduct(
            name="Wooden Desk Nameplate",
            description=(
                "Add a touch of personalization to your desk with this handcrafted wooden "
                "nameplate. Available in walnut, oak, or maple."
            ),
            short_description="Walnut, oak, or maple",
            price=Decimal("59.99"),
            category_id=categories["Woodcraft"],
            rating=4.6,
            image=_image("1531661339613-3aa1c7fb1fdc"),
            images=(_image("1531661339613-3aa1c7fb1fdc", 800),),
            is_new=True,
            customization_options=(types["engraving"], types["color_options"]),
            features=(
                "Solid hardwood construction",
                "Choice of wood types",
                "Precision engraving",
                "Desk or wall mount options",
                "Natural oil finish",
            ),
        ),
    ]


# ==============================================================================
# Seeding
# ==============================================================================


def seed_catalog(repository: CatalogRepository) -> bool:
    """
    Populate an empty catalog with the reference data.

    Returns:
        True if data was written, False if the catalog already had categories
    """
    if repository.list_categories():
        logger.info("Catalog already seeded, skipping")
        return False

    types = {
        data.name: repository.create_customization_type(data).id for data in CUSTOMIZATION_TYPES
    }
    categories = {data.name: repository.create_category(data).id for data in CATEGORIES}
    products = [repository.create_product(data) for data in _products(types, categories)]

    logger.info(
        "Catalog seeded",
        extra={
            "customization_types": len(types),
            "categories": len(categories),
            "products": len(products),
        },
    )
    return True
