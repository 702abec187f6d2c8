from datetime import datetime
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..models.tarefa import StatusTarefa
from ..repositories.tarefa_repository import SqlAlchemyTarefaRepository
from ..schemas.tarefa import ErroResponse, TarefaIn, TarefaResponse
from ..services.tarefa_service import ResultKind, ServiceResult, TarefaService

router = APIRouter()

ERROR_STATUS_CODES = {
    ResultKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResultKind.FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class TarefaInvalidaError(Exception):
    """Caller sent an unacceptable task; rendered as 400 {"Erro": ...}"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def get_tarefa_service(db: Session = Depends(get_db)) -> TarefaService:
    """Task service bound to the request's database session"""
    return TarefaService(SqlAlchemyTarefaRepository(db))


def unwrap(result: ServiceResult):
    """Return the result value, or raise the HTTP error for its kind"""
    if result.kind == ResultKind.INVALID:
        raise TarefaInvalidaError(result.message)
    if result.kind in ERROR_STATUS_CODES:
        raise HTTPException(
            status_code=ERROR_STATUS_CODES[result.kind],
            detail=result.message
        )
    return result.value


# Fixed paths are registered before "/{tarefa_id}" so they are not read as ids
@router.get("/ObterTodos", response_model=List[TarefaResponse])
def obter_todos(service: TarefaService = Depends(get_tarefa_service)):
    """Get every task; 404 when there are none"""
    return unwrap(service.list_all())


@router.get("/ObterPorTitulo", response_model=List[TarefaResponse])
def obter_por_titulo(
    titulo: str = Query(..., description="Substring of the task title"),
    service: TarefaService = Depends(get_tarefa_service)
):
    """Get tasks whose title contains the given text"""
    return unwrap(service.find_by_title(titulo))


@router.get("/ObterPorData", response_model=List[TarefaResponse])
def obter_por_data(
    data: datetime = Query(..., description="Day to match; time of day is ignored"),
    service: TarefaService = Depends(get_tarefa_service)
):
    """Get tasks dated on the same day"""
    return unwrap(service.find_by_date(data))


@router.get(
    "/ObterPorStatus",
    response_model=List[TarefaResponse],
    responses={400: {"model": ErroResponse}}
)
def obter_por_status(
    status_value: str = Query(..., alias="status", description="Status ordinal or name"),
    service: TarefaService = Depends(get_tarefa_service)
):
    """Get tasks with the given status"""
    try:
        status_tarefa = StatusTarefa.parse(status_value)
    except ValueError:
        raise TarefaInvalidaError(f"Status inválido: {status_value}")
    return unwrap(service.find_by_status(status_tarefa))


@router.get("/{tarefa_id}", response_model=TarefaResponse, name="obter_por_id")
def obter_por_id(tarefa_id: int, service: TarefaService = Depends(get_tarefa_service)):
    """Get a specific task by ID"""
    return unwrap(service.get(tarefa_id))


@router.post(
    "",
    response_model=TarefaResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErroResponse}}
)
def criar(
    tarefa: TarefaIn,
    request: Request,
    response: Response,
    service: TarefaService = Depends(get_tarefa_service)
):
    """Create a new task"""
    criada = unwrap(service.create(tarefa))
    response.headers["Location"] = str(request.url_for("obter_por_id", tarefa_id=criada.id))
    return criada


@router.put(
    "/{tarefa_id}",
    response_model=TarefaResponse,
    responses={400: {"model": ErroResponse}}
)
def atualizar(
    tarefa_id: int,
    tarefa: TarefaIn,
    service: TarefaService = Depends(get_tarefa_service)
):
    """Overwrite title, description, date and status of a task"""
    return unwrap(service.update(tarefa_id, tarefa))


@router.delete("/{tarefa_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar(tarefa_id: int, service: TarefaService = Depends(get_tarefa_service)):
    """Delete a task"""
    unwrap(service.delete(tarefa_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
