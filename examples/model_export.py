"""Example: Pydantic model export

Converts a Pydantic model to a document, adds a doctype, and writes it with
four-space indentation.
"""

from pydantic import BaseModel, Field
from treexml import model_to_document, stringify


class Address(BaseModel):
    street: str
    city: str


class Customer(BaseModel):
    name: str = Field(description="Full name")
    vip: bool = False
    addresses: list[Address] = []


customer = Customer(
    name="Ada Lovelace",
    vip=True,
    addresses=[Address(street="12 St James's Square", city="London")],
)


if __name__ == "__main__":
    document = model_to_document(customer, root_tag="customer", description_format="comment")
    document = {"doctype": {"@customer": ""}, **document}
    print(stringify(document, indent_size=4))
