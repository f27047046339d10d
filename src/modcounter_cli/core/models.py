from pydantic import BaseModel, ConfigDict, Field

# version -> (mod loader id -> mod count), in the order they were entered
ModCounts = dict[str, dict[str, int]]


class Pagination(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    index: int = 0
    page_size: int = Field(default=0, alias="pageSize")
    result_count: int = Field(default=0, alias="resultCount")
    # Must be a JSON integer, "150" or 150.0 are rejected
    total_count: int = Field(alias="totalCount", strict=True)


class SearchResponse(BaseModel):
    # Hits are ignored, only the total is needed
    pagination: Pagination


class OutputFile(BaseModel):
    data: ModCounts = Field(default_factory=dict)
