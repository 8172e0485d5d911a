"""Table API schemas."""

from pydantic import BaseModel, Field


class TableSchema(BaseModel):
    """Baserow table as returned by the table listing."""

    id: int
    name: str
    database_id: int = Field(alias="databaseId")

    class Config:
        populate_by_name = True
