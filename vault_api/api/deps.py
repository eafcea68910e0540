from vault_api.config import settings
from vault_api.services.metadata import MetadataService


async def get_metadata_service() -> MetadataService:
    return MetadataService(settings)
