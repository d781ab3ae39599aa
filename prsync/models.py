"""Shared pydantic models — the contract between the tracker provider and the pipeline."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

CODE_REVIEW = "CODE REVIEW"
READY_FOR_QA = "READY FOR QA"

# Order matters: label normalization checks READY FOR QA first.
CANONICAL_STATUSES = (CODE_REVIEW, READY_FOR_QA)


class EventContext(BaseModel):
    """What the status resolver needs to know about the triggering event."""

    model_config = ConfigDict(frozen=True)

    event_name: str
    action: str | None = None
    author_login: str
    review_state: str | None = None


class EnumOption(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(alias="gid")
    label: str = Field(alias="name")


class CustomField(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(alias="gid")
    name: str
    options: list[EnumOption] = Field(default=[], alias="enum_options")

    @field_validator("options", mode="before")
    @classmethod
    def _null_options(cls, value: object) -> object:
        # Non-enum fields come back with enum_options missing or null
        return [] if value is None else value


class Task(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(alias="gid")
    name: str | None = None
    custom_fields: list[CustomField] | None = None


class StatusField(BaseModel):
    """Result of reconciling a task's status field against the canonical statuses."""

    model_config = ConfigDict(frozen=True)

    field_id: str
    options: dict[str, str]  # canonical status name -> option id

    def option_id_for(self, status: str) -> str:
        return self.options[status]


class UpdatePayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    field_id: str
    option_id: str

    def as_request_body(self) -> dict:
        return {"custom_fields": {self.field_id: self.option_id}}
