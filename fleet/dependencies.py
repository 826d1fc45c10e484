from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fleet.config import settings
from fleet.database import get_db
from fleet.store import Stores


async def verify_api_key(x_api_key: str = Header(default="")) -> None:
    if not settings.api_key:
        return
    if x_api_key != settings.api_key:
        raise HTTPException(status_code=403, detail="Invalid or missing API key")


async def get_stores(db: AsyncSession = Depends(get_db)) -> Stores:
    return Stores.from_session(db)


async def get_caller(x_principal: str = Header(default="")) -> str:
    return x_principal.strip() or settings.anonymous_principal
