import enum
from sqlalchemy import Column, Integer, Text, DateTime
from ..core.database import Base


class StatusTarefa(enum.IntEnum):
    """Task status, persisted as its ordinal"""
    PENDENTE = 0
    FINALIZADO = 1

    @classmethod
    def parse(cls, value) -> "StatusTarefa":
        """
        Decode a status from its wire form.

        Accepts the member itself, its ordinal (as int or numeric string)
        or its name in any letter case.

        Raises:
            ValueError: If the value names no member
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid task status: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                pass
        raise ValueError(f"Invalid task status: {value!r}")


class Tarefa(Base):
    """Task model for database"""
    __tablename__ = "tarefas"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    titulo = Column(Text, nullable=False, default="")
    descricao = Column(Text, nullable=True)

    # Naive datetime, UTC when the client sent an offset
    data = Column(DateTime, nullable=False, index=True)

    status = Column(
        Integer,
        default=StatusTarefa.PENDENTE.value,
        nullable=False,
        index=True
    )

    def __repr__(self):
        return f"<Tarefa(id={self.id}, titulo='{self.titulo}', status={self.status})>"
