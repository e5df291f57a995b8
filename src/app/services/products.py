from collections.abc import Sequence
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from app.models.requests import CreateProductRequest, UpdateProductRequest
from app.models.schema import Product
from app.repositories import ProductRepository
from app.shared import Logger
from app.shared.errors import ResourceNotFoundError

logger = Logger(__name__).get_logger()


class ProductService:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def create_product(self, request: CreateProductRequest) -> Product:
        product = Product(
            name=request.name,
            description=request.description,
            price=request.price,
            stock=request.stock,
            available=request.stock > 0,
        )
        product = self.repository.save(product)
        logger.info("Created product with id: %s", product.id)
        return product

    def get_product_by_id(self, product_id: UUID) -> Product:
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ResourceNotFoundError(f"Product not found with id: {product_id}")
        return product

    def get_all_products(self) -> Sequence[Product]:
        return self.repository.find_all()

    def get_available_products(self) -> Sequence[Product]:
        return self.repository.find_by_available_true()

    def search_products_by_name(self, name: str) -> Sequence[Product]:
        return self.repository.find_by_name_containing_ignore_case(name)

    def get_products_up_to_price(self, price: Decimal) -> Sequence[Product]:
        return self.repository.find_by_price_less_than_equal(price)

    def get_in_stock_products(self) -> Sequence[Product]:
        return self.repository.find_by_stock_greater_than(0)

    def update_product(
        self, product_id: UUID, request: UpdateProductRequest
    ) -> Product:
        """Apply the fields present in ``request``, leave the rest untouched."""
        product = self.get_product_by_id(product_id)

        changes = request.model_dump(exclude_none=True)
        for field, value in changes.items():
            setattr(product, field, value)
        product.updated_at = datetime.now(UTC)

        product = self.repository.save(product)
        logger.info("Updated product with id: %s", product_id)
        return product

    def update_stock(self, product_id: UUID, quantity: int) -> Product:
        """Add ``quantity`` (may be negative) to the stock level."""
        product = self.get_product_by_id(product_id)

        old_stock = product.stock
        new_stock = old_stock + quantity
        if new_stock < 0:
            raise ValueError(f"Insufficient stock for product {product_id}")

        product.stock = new_stock
        product.available = new_stock > 0
        product.updated_at = datetime.now(UTC)

        product = self.repository.save(product)
        logger.info(
            "Updated stock for product %s: %s -> %s", product_id, old_stock, new_stock
        )
        return product

    def delete_product(self, product_id: UUID) -> None:
        product = self.get_product_by_id(product_id)
        self.repository.delete(product)
        logger.info("Deleted product with id: %s", product_id)
