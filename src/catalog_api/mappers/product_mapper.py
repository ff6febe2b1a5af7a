"""Translations between wire schemas, domain records and ORM entities."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from src.catalog_api.schemas.product_schemas import (
    PriceSchema,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductPageResponse,
)
from src.data.models.db_entity.product import Product
from src.data.models.domain_entity import Price, ProductRecord
from src.data.postgres.pagination import Page

# Matches the scale of the price column
PRICE_QUANTUM = Decimal("0.01")


def price_schema_to_domain(schema: PriceSchema | None) -> Price | None:
    if schema is None:
        return None
    return Price(value=schema.value, currency=schema.currency)


def price_domain_to_schema(price: Price | None) -> PriceSchema | None:
    if price is None or price.value is None or price.currency is None:
        return None
    return PriceSchema(value=price.value, currency=price.currency)


def create_request_to_domain(request: ProductCreate) -> ProductRecord:
    return ProductRecord(
        code=request.code,
        name=request.name,
        description=request.description,
        base_price=price_schema_to_domain(request.base_price),
        is_in_stock=request.is_in_stock,
        stock_keeping_unit=request.stock_keeping_unit,
        category_code=request.category_code,
        catalog_code=request.catalog_code,
    )


def update_request_to_domain(code: str, request: ProductUpdate) -> ProductRecord:
    """The code comes from the URL path; update payloads never carry one."""
    return ProductRecord(
        code=code,
        name=request.name,
        description=request.description,
        base_price=price_schema_to_domain(request.base_price),
        is_in_stock=request.is_in_stock,
        stock_keeping_unit=request.stock_keeping_unit,
        category_code=request.category_code,
        catalog_code=request.catalog_code,
    )


def entity_to_domain(product: Product) -> ProductRecord:
    price = None
    if product.base_price_value is not None or product.base_price_currency is not None:
        price = Price(value=product.base_price_value, currency=product.base_price_currency)
    return ProductRecord(
        code=product.code,
        name=product.name,
        description=product.description,
        base_price=price,
        is_in_stock=product.is_in_stock,
        stock_keeping_unit=product.stock_keeping_unit,
        category_code=product.category_code,
        catalog_code=product.catalog_code,
    )


def cached_dict_to_domain(data: dict) -> ProductRecord:
    """Rebuild a record from a cached ``Product.to_dict()`` payload."""
    value = data.get("base_price_value")
    currency = data.get("base_price_currency")
    price = None
    if value is not None or currency is not None:
        price = Price(value=Decimal(value) if value is not None else None, currency=currency)
    return ProductRecord(
        code=data["code"],
        name=data.get("name"),
        description=data.get("description"),
        base_price=price,
        is_in_stock=data.get("is_in_stock"),
        stock_keeping_unit=data.get("stock_keeping_unit"),
        category_code=data.get("category_code"),
        catalog_code=data.get("catalog_code"),
    )


def domain_to_entity(record: ProductRecord) -> Product:
    """New entity for ``record``. Relation codes are resolved by the service."""
    product = Product(code=record.code)
    apply_domain_to_entity(record, product)
    return product


def apply_domain_to_entity(record: ProductRecord, product: Product) -> None:
    """Copy every mutable field except the code and relations onto ``product``."""
    product.name = record.name
    product.description = record.description
    price_value = record.base_price.value if record.base_price else None
    if price_value is not None:
        price_value = Decimal(price_value).quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    product.base_price_value = price_value
    product.base_price_currency = record.base_price.currency if record.base_price else None
    product.is_in_stock = bool(record.is_in_stock) if record.is_in_stock is not None else True
    product.stock_keeping_unit = record.stock_keeping_unit


def domain_to_response(record: ProductRecord) -> ProductResponse:
    return ProductResponse(
        code=record.code,
        name=record.name,
        description=record.description,
        base_price=price_domain_to_schema(record.base_price),
        is_in_stock=bool(record.is_in_stock),
        stock_keeping_unit=record.stock_keeping_unit,
        category_code=record.category_code,
        catalog_code=record.catalog_code,
    )


def domains_to_responses(records: Iterable[ProductRecord]) -> list[ProductResponse]:
    return [domain_to_response(record) for record in records]


def page_to_response(page: Page[ProductRecord]) -> ProductPageResponse:
    return ProductPageResponse(
        content=domains_to_responses(page.content),
        page=page.page,
        size=page.size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        last=page.last,
    )
