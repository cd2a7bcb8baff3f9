from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """
    조회 예제에서 쓰이는 최소 사용자 모델.
    Minimal user record used by the lookup pipeline.
    """

    model_config = ConfigDict(frozen=True)

    id: int
