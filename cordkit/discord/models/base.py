from pydantic import BaseModel


class RawBaseModel(BaseModel):
    def __init__(self, **data) -> None:  # noqa: ANN003
        super().__init__(**data)
        self.__raw_data = data.copy()

    @property
    def _raw(self) -> dict:
        return self.__raw_data
