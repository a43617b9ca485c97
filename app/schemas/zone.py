from pydantic import BaseModel


class ZoneRead(BaseModel):
    code: str
    label: str
    temperature_range: str

    model_config = {"from_attributes": True}
