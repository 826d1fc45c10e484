from typing import Any

from pydantic import BaseModel


def success_response(data: Any = None, message: str | None = None) -> dict:
    return {"status": "success", "data": data, "message": message}


def error_response(message: str, data: Any = None) -> dict:
    return {"status": "error", "data": data, "message": message}


def dump(schema: type[BaseModel], record: Any) -> dict:
    return schema.model_validate(record).model_dump(mode="json")


def dump_all(schema: type[BaseModel], records: list[Any]) -> list[dict]:
    return [dump(schema, r) for r in records]
