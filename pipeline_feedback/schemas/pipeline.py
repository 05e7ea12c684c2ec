from pydantic import BaseModel, ConfigDict, Field


class Pipeline(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | str


class Job(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | str
    name: str = ""
    status: str = Field("", description="GitLab job status, e.g. success, failed, canceled, skipped")

    @property
    def failed(self) -> bool:
        return self.status == "failed"
