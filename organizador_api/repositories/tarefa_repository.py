"""
Task store interface and its SQLAlchemy implementation.

Lookups signal absence with ``None``/``False``/an empty list. Backend
failures are raised as exceptions and left to the service layer.
"""
import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models.tarefa import StatusTarefa, Tarefa
from ..schemas.tarefa import TarefaIn

logger = logging.getLogger(__name__)


class TarefaRepository(ABC):
    """Persistent store of tasks"""

    @abstractmethod
    def get(self, tarefa_id: int) -> Optional[Tarefa]:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[Tarefa]:
        raise NotImplementedError

    @abstractmethod
    def find_by_title(self, titulo: str) -> List[Tarefa]:
        raise NotImplementedError

    @abstractmethod
    def find_by_date(self, dia: date) -> List[Tarefa]:
        raise NotImplementedError

    @abstractmethod
    def find_by_status(self, status: StatusTarefa) -> List[Tarefa]:
        raise NotImplementedError

    @abstractmethod
    def add(self, dados: TarefaIn) -> Tarefa:
        raise NotImplementedError

    @abstractmethod
    def update(self, tarefa_id: int, dados: TarefaIn) -> Optional[Tarefa]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, tarefa_id: int) -> bool:
        raise NotImplementedError


class SqlAlchemyTarefaRepository(TarefaRepository):
    """Task store backed by a SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def get(self, tarefa_id: int) -> Optional[Tarefa]:
        return self.db.get(Tarefa, tarefa_id)

    def list_all(self) -> List[Tarefa]:
        return self.db.query(Tarefa).order_by(Tarefa.id).all()

    def find_by_title(self, titulo: str) -> List[Tarefa]:
        return (
            self.db.query(Tarefa)
            .filter(Tarefa.titulo.contains(titulo, autoescape=True))
            .order_by(Tarefa.id)
            .all()
        )

    def find_by_date(self, dia: date) -> List[Tarefa]:
        # Half-open range over the whole day keeps the column index usable
        inicio = datetime.combine(dia, time.min)
        query = self.db.query(Tarefa).filter(Tarefa.data >= inicio)
        if dia < date.max:
            query = query.filter(Tarefa.data < inicio + timedelta(days=1))
        return query.order_by(Tarefa.id).all()

    def find_by_status(self, status: StatusTarefa) -> List[Tarefa]:
        return (
            self.db.query(Tarefa)
            .filter(Tarefa.status == int(status))
            .order_by(Tarefa.id)
            .all()
        )

    def add(self, dados: TarefaIn) -> Tarefa:
        tarefa = Tarefa(
            titulo=dados.titulo,
            descricao=dados.descricao,
            data=dados.data,
            status=int(dados.status),
        )
        try:
            self.db.add(tarefa)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(tarefa)
        logger.debug(f"Inserted {tarefa!r}")
        return tarefa

    def update(self, tarefa_id: int, dados: TarefaIn) -> Optional[Tarefa]:
        tarefa = self.get(tarefa_id)
        if tarefa is None:
            return None

        tarefa.titulo = dados.titulo
        tarefa.descricao = dados.descricao
        tarefa.data = dados.data
        tarefa.status = int(dados.status)

        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(tarefa)
        logger.debug(f"Updated {tarefa!r}")
        return tarefa

    def delete(self, tarefa_id: int) -> bool:
        tarefa = self.get(tarefa_id)
        if tarefa is None:
            return False

        try:
            self.db.delete(tarefa)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.debug(f"Deleted task {tarefa_id}")
        return True
