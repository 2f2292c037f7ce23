from pydantic import BaseModel

class CategoryRead(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}

class ExerciseRead(BaseModel):
    id: int
    name: str
    category_id: int | None = None
    category_name: str | None = None
    muscle_group: str | None = None
    difficulty: str | None = None
    calories_per_minute: float

    model_config = {"from_attributes": True}
