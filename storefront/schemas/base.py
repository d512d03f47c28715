# storefront/schemas/base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for request/response bodies.

    Python attributes are snake_case; the storefront speaks camelCase
    (productId, orderId, customerName, ...). Either spelling is accepted
    on input, responses are serialized by alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
