from typing import List
from pydantic import BaseModel

# Output schema for /stats/mean
class MeanOut(BaseModel):
    mean: float  # Arithmetic mean
    count: int   # Number of values read from the source

# Output schema for /stats/median
class MedianOut(BaseModel):
    median: float
    count: int

# Output schema for /stats/mode
class ModeOut(BaseModel):
    mode: List[int]  # Most frequent values, first-occurrence order
    count: int

# Error body for 400/503 responses
class ErrorOut(BaseModel):
    detail: str
