from collections.abc import Sequence
from decimal import Decimal
from uuid import UUID

from sqlmodel import Session, col, select

from app.models.schema import Product


class ProductRepository:
    """Save/find/delete access to the ``products`` table."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, product: Product) -> Product:
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        return product

    def find_by_id(self, product_id: UUID) -> Product | None:
        return self.session.get(Product, product_id)

    def find_all(self) -> Sequence[Product]:
        return self.session.exec(select(Product).order_by(Product.id)).all()

    def find_by_available_true(self) -> Sequence[Product]:
        statement = select(Product).where(col(Product.available).is_(True))
        return self.session.exec(statement.order_by(Product.id)).all()

    def find_by_name_containing_ignore_case(self, name: str) -> Sequence[Product]:
        statement = select(Product).where(
            col(Product.name).icontains(name, autoescape=True)
        )
        return self.session.exec(statement.order_by(Product.id)).all()

    def find_by_price_less_than_equal(self, price: Decimal) -> Sequence[Product]:
        statement = select(Product).where(col(Product.price) <= price)
        return self.session.exec(statement.order_by(Product.id)).all()

    def find_by_stock_greater_than(self, stock: int) -> Sequence[Product]:
        statement = select(Product).where(col(Product.stock) > stock)
        return self.session.exec(statement.order_by(Product.id)).all()

    def delete(self, product: Product) -> None:
        self.session.delete(product)
        self.session.commit()
