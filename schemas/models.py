from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict

Language = Literal["c", "cpp", "go", "java", "javascript", "python", "ruby"]


class Judge0Submission(BaseModel):
    language_id: int
    source_code: str  # base64
    redirect_stderr_to_stdout: bool = True


class Judge0Result(BaseModel):
    # Judge0 returns many more fields (status, time, token, memory, ...); they are ignored
    model_config = ConfigDict(extra="ignore")

    compile_output: Optional[str] = None
    stdout: Optional[str] = None
