"""
Pydantic schemas for Organizador API.
"""
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ..models.tarefa import StatusTarefa

# Unset date marker; payloads carrying it are rejected
SENTINEL_DATE = datetime.min


def convert_datetime_to_utc(dt: datetime) -> datetime:
    """Convert an offset-aware datetime to naive UTC; naive values pass through"""
    if dt.tzinfo is None:
        return dt
    try:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    except OverflowError:
        # Offsets next to datetime.min/max cannot be shifted
        return dt.replace(tzinfo=None)


class TarefaBase(BaseModel):
    """Base task schema"""
    titulo: str = Field("", description="Task title")
    descricao: Optional[str] = Field(None, description="Task description")
    data: datetime = Field(SENTINEL_DATE, description="Task date")
    status: StatusTarefa = Field(StatusTarefa.PENDENTE, description="Task status")

    @field_validator("titulo", mode="before")
    @classmethod
    def null_title_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value):
        return StatusTarefa.parse(value)

    @field_validator("data")
    @classmethod
    def normalize_data(cls, value: datetime) -> datetime:
        return convert_datetime_to_utc(value)


class TarefaIn(TarefaBase):
    """Schema for creating or updating a task; any id in the body is ignored"""

    def has_sentinel_date(self) -> bool:
        return self.data == SENTINEL_DATE


class TarefaResponse(TarefaBase):
    """Schema for task response"""
    id: int = Field(..., description="Task ID")

    class Config:
        from_attributes = True


class ErroResponse(BaseModel):
    """Body of a 400 validation response"""
    Erro: str
