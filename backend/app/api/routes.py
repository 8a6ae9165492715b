"""FastAPI routes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.adapters.filesystem import DirectoryScanner
from app.config import Settings, get_settings
from app.domain.models import AggregatedView, ErrorResponse, ServiceCreatedResponse, ServiceCreateRequest
from app.services.aggregator import ServiceAggregator
from app.services.writer import ServiceWriter

router = APIRouter(prefix="/api")


def get_aggregator(settings: Annotated[Settings, Depends(get_settings)]) -> ServiceAggregator:
    return ServiceAggregator(DirectoryScanner(settings.config_dir), groups_filename=settings.groups_filename)


def get_writer(settings: Annotated[Settings, Depends(get_settings)]) -> ServiceWriter:
    return ServiceWriter(settings.store_path)


@router.get("/config", response_model=AggregatedView, responses={500: {"model": ErrorResponse}})
def get_config(aggregator: Annotated[ServiceAggregator, Depends(get_aggregator)]):
    return aggregator.build_view()


@router.post(
    "/services",
    response_model=ServiceCreatedResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_service(
    payload: ServiceCreateRequest,
    writer: Annotated[ServiceWriter, Depends(get_writer)],
):
    service = writer.append(payload)
    return ServiceCreatedResponse(message="Service added successfully", service=service)
