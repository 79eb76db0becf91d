from .base import BaseSchema
from .shippo import (
    RequestSpec,
    PaginationSpec,
    PageEnvelope,
    OutputItem,
)
