from typing import Optional

from sqlmodel import Field, SQLModel


class ItemBase(SQLModel):
    name: str = Field(min_length=1, max_length=100)
    category_id: int = Field(nullable=False, foreign_key="category.id")
    image: Optional[str] = Field(default=None, max_length=100)


class Item(ItemBase):
    id: Optional[int] = Field(
        primary_key=True,
        index=True,
        nullable=False,
    )


class ItemInDB(Item, table=True):
    __tablename__ = "items"


class ItemOutput(SQLModel):
    """ Item joined with the name of its category """
    name: str
    category: str
    image: Optional[str] = None


class ItemsOutput(SQLModel):
    items: list[ItemOutput]
