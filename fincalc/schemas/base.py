"""Schema Base — camelCase wire names for every API model.

Design Decisions:
    - alias_generator=to_camel keeps Python attributes snake_case while the
      JSON contract stays userId/createdAt/monthlyIncome
    - populate_by_name: tests and internal callers may build models with snake_case
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
