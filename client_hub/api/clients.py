"""Clients API endpoints."""

from fastapi import APIRouter, Depends, Response, status
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession

from client_hub.api.deps import get_db, get_or_404
from client_hub.api.schemas import MAX_LOGO_LENGTH, CamelModel
from client_hub.core.logging import get_logger
from client_hub.models import Client
from client_hub.services import delete_client_cascade, list_clients_statement, merge_fields

logger = get_logger(__name__)

router = APIRouter(prefix="/api/clients", tags=["clients"])

NULLABLE_FIELDS = frozenset({"logo", "phone"})


class ClientCreateRequest(CamelModel):
    """Payload for creating a client. A supplied ``id`` is ignored."""

    name: str = Field(min_length=1, max_length=255)
    email: str = Field(default="", max_length=255)
    company: str = Field(default="", max_length=255)
    logo: str | None = Field(default=None, max_length=MAX_LOGO_LENGTH)
    phone: str | None = Field(default=None, max_length=50)


class ClientUpdateRequest(CamelModel):
    """Payload for updating a client; only supplied fields change."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    logo: str | None = Field(default=None, max_length=MAX_LOGO_LENGTH)
    phone: str | None = Field(default=None, max_length=50)


class ClientResponse(CamelModel):
    """Client response model."""

    id: str
    name: str
    email: str
    company: str
    logo: str | None = None
    phone: str | None = None


def to_client_response(client: Client) -> ClientResponse:
    """Map SQLAlchemy client model to response model."""
    return ClientResponse(
        id=client.id,
        name=client.name,
        email=client.email,
        company=client.company,
        logo=client.logo,
        phone=client.phone,
    )


@router.get("", response_model=list[ClientResponse])
async def list_clients(db: AsyncSession = Depends(get_db)) -> list[ClientResponse]:
    """List all clients ordered by name."""
    result = await db.execute(list_clients_statement())
    return [to_client_response(client) for client in result.scalars().all()]


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    payload: ClientCreateRequest,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Create a new client."""
    client = Client(**payload.model_dump())
    db.add(client)
    await db.commit()
    logger.info("client_created", client_id=client.id)
    return to_client_response(client)


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Get client by ID."""
    client = await get_or_404(db, Client, client_id, "Client")
    return to_client_response(client)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    payload: ClientUpdateRequest,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Merge supplied fields into an existing client."""
    client = await get_or_404(db, Client, client_id, "Client")
    changed = merge_fields(
        client, payload.model_dump(exclude_unset=True), nullable=NULLABLE_FIELDS
    )
    await db.commit()
    logger.info("client_updated", client_id=client.id, fields=changed)
    return to_client_response(client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: str,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a client together with its projects and their tasks."""
    client = await get_or_404(db, Client, client_id, "Client")
    removed = await delete_client_cascade(db, client)
    await db.commit()
    logger.info(
        "client_deleted",
        client_id=client_id,
        projects_removed=removed.projects,
        tasks_removed=removed.tasks,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
