"""Demo catalog items and categories."""

from invoice_builder.models.catalog import PRODUCT, SERVICE, CatalogItem, Category

DEMO_CATEGORIES = [
    Category(id="cat-consulting", name="Consulting"),
    Category(id="cat-hardware", name="Hardware"),
    Category(id="cat-software", name="Software"),
    Category(id="cat-support", name="Support"),
]

_NAMES = {category.id: category.name for category in DEMO_CATEGORIES}


def _item(
    item_id: str,
    name: str,
    item_type: str,
    category_id: str | None,
    description: str | None = None,
    sale_price: float | None = None,
) -> CatalogItem:
    return CatalogItem(
        id=item_id,
        name=name,
        type=item_type,
        description=description,
        category_id=category_id,
        category_name=_NAMES.get(category_id) if category_id else None,
        sale_price_enabled=sale_price is not None,
        sale_price=sale_price,
    )


DEMO_ITEMS = [
    _item(
        "item-001",
        "Consulting Hour",
        SERVICE,
        "cat-consulting",
        "Senior consultant time, billed hourly.",
        180.0,
    ),
    _item(
        "item-002",
        "Discovery Workshop",
        SERVICE,
        "cat-consulting",
        "Half-day requirements workshop with stakeholders.",
        1200.0,
    ),
    _item(
        "item-003",
        "27\" 4K Monitor",
        PRODUCT,
        "cat-hardware",
        "IPS panel, USB-C power delivery.",
        429.0,
    ),
    _item(
        "item-004",
        "Mechanical Keyboard",
        PRODUCT,
        "cat-hardware",
        "Tenkeyless, hot-swappable switches.",
        149.5,
    ),
    _item(
        "item-005",
        "Docking Station",
        PRODUCT,
        "cat-hardware",
        None,
        239.99,
    ),
    _item(
        "item-006",
        "Accounting Suite License",
        PRODUCT,
        "cat-software",
        "Annual license, single seat.",
        540.0,
    ),
    _item(
        "item-007",
        "Remote Support Plan",
        SERVICE,
        "cat-support",
        "Business hours remote support, per month.",
        95.0,
    ),
    _item(
        "item-008",
        "On-site Call-out",
        SERVICE,
        "cat-support",
        "Travel and first hour on site. Priced per job.",
    ),
    _item(
        "item-009",
        "Cable Kit",
        PRODUCT,
        None,
        "Assorted HDMI, DisplayPort and USB-C cables.",
        35.0,
    ),
]
