"""
Task service.

Runs one store operation per call and reports its outcome as a
``ServiceResult``. Unexpected exceptions stop here: they are logged with
traceback and reported as ``ResultKind.FAILURE``.
"""
import enum
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

from ..models.tarefa import StatusTarefa
from ..repositories.tarefa_repository import TarefaRepository
from ..schemas.tarefa import TarefaIn, convert_datetime_to_utc

logger = logging.getLogger(__name__)

MSG_NOT_FOUND = "Tarefa não encontrada."
MSG_NONE_FOUND = "Nenhuma tarefa encontrada."
MSG_NONE_BY_TITLE = "Nenhuma tarefa encontrada com o título especificado."
MSG_NONE_BY_DATE = "Nenhuma tarefa encontrada para a data especificada."
MSG_NONE_BY_STATUS = "Nenhuma tarefa encontrada para o status especificado."
MSG_EMPTY_DATE = "A data da tarefa não pode ser vazia"
MSG_INTERNAL_ERROR = "Ocorreu um erro ao processar sua solicitação."


class ResultKind(str, enum.Enum):
    """Outcome of a service call"""
    OK = "ok"
    CREATED = "created"
    NO_CONTENT = "no_content"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    FAILURE = "failure"


@dataclass
class ServiceResult:
    kind: ResultKind
    value: Any = None
    message: Optional[str] = None


def _found_or(value, message: str) -> ServiceResult:
    if not value:
        return ServiceResult(ResultKind.NOT_FOUND, message=message)
    return ServiceResult(ResultKind.OK, value)


class TarefaService:
    """Task operations over a ``TarefaRepository``"""

    def __init__(self, repository: TarefaRepository):
        self.repository = repository

    def _guard(self, action: str, operation: Callable[[], ServiceResult]) -> ServiceResult:
        try:
            return operation()
        except Exception:
            logger.exception(f"Error {action}")
            return ServiceResult(ResultKind.FAILURE, message=MSG_INTERNAL_ERROR)

    def _invalid_date(self, dados: TarefaIn) -> Optional[ServiceResult]:
        if dados.has_sentinel_date():
            logger.info("Rejected task payload with empty date")
            return ServiceResult(ResultKind.INVALID, message=MSG_EMPTY_DATE)
        return None

    def get(self, tarefa_id: int) -> ServiceResult:
        return self._guard(
            f"getting task {tarefa_id}",
            lambda: _found_or(self.repository.get(tarefa_id), MSG_NOT_FOUND),
        )

    def list_all(self) -> ServiceResult:
        return self._guard(
            "listing tasks",
            lambda: _found_or(self.repository.list_all(), MSG_NONE_FOUND),
        )

    def find_by_title(self, titulo: str) -> ServiceResult:
        return self._guard(
            "finding tasks by title",
            lambda: _found_or(self.repository.find_by_title(titulo), MSG_NONE_BY_TITLE),
        )

    def find_by_date(self, data: datetime) -> ServiceResult:
        dia = convert_datetime_to_utc(data).date()
        return self._guard(
            "finding tasks by date",
            lambda: _found_or(self.repository.find_by_date(dia), MSG_NONE_BY_DATE),
        )

    def find_by_status(self, status: StatusTarefa) -> ServiceResult:
        return self._guard(
            "finding tasks by status",
            lambda: _found_or(self.repository.find_by_status(status), MSG_NONE_BY_STATUS),
        )

    def create(self, dados: TarefaIn) -> ServiceResult:
        invalid = self._invalid_date(dados)
        if invalid:
            return invalid

        def operation():
            tarefa = self.repository.add(dados)
            logger.info(f"Created task {tarefa.id}")
            return ServiceResult(ResultKind.CREATED, tarefa)

        return self._guard("creating task", operation)

    def update(self, tarefa_id: int, dados: TarefaIn) -> ServiceResult:
        invalid = self._invalid_date(dados)
        if invalid:
            return invalid

        def operation():
            tarefa = self.repository.update(tarefa_id, dados)
            if tarefa is None:
                return ServiceResult(ResultKind.NOT_FOUND, message=MSG_NOT_FOUND)
            logger.info(f"Updated task {tarefa_id}")
            return ServiceResult(ResultKind.OK, tarefa)

        return self._guard(f"updating task {tarefa_id}", operation)

    def delete(self, tarefa_id: int) -> ServiceResult:
        def operation():
            if not self.repository.delete(tarefa_id):
                return ServiceResult(ResultKind.NOT_FOUND, message=MSG_NOT_FOUND)
            logger.info(f"Deleted task {tarefa_id}")
            return ServiceResult(ResultKind.NO_CONTENT)

        return self._guard(f"deleting task {tarefa_id}", operation)
