from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict


class Person(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    role: str = Field(min_length=1)


class AnnotatedRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    role: str
    group_index: int = Field(ge=1)  # 1-based

    def as_row(self) -> List:
        return [self.name, self.role, self.group_index]


class AllocationResult(BaseModel):
    sizes: List[int] = Field(default_factory=list)
    quotas: Dict[str, List[int]] = Field(default_factory=dict)
    groups: List[List[Person]] = Field(default_factory=list)
    records: List[AnnotatedRecord] = Field(default_factory=list)
