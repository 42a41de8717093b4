from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Question(BaseModel):
    """
    JUPEB 객관식 문제 모델
    Pydantic v2 적용, 생성 후 변경 불가(frozen)
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(
        ...,
        description="문제 번호 (고유 식별자)"
    )
    question_text: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("question_text", "questionText"),
        description="발문/문제 내용"
    )
    options: List[str] = Field(
        ...,
        description="보기 리스트 (객관식 선지, 순서 유지)"
    )
    correct_answer_index: int = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("correct_answer_index", "correctAnswerIndex"),
        description="정답 보기의 인덱스 (0-based)"
    )

    @field_validator('options')
    @classmethod
    def validate_options_not_empty(cls, v: List[str]) -> List[str]:
        """
        보기는 최소 1개 이상이어야 한다.
        정답 인덱스의 범위는 검사하지 않는다 (문제은행 데이터의 책임).
        """
        if not v:
            raise ValueError("보기(options)는 최소 1개 이상의 항목이 필요합니다.")
        return v

    def has_option(self, index: int) -> bool:
        return 0 <= index < len(self.options)

    def option_text(self, index: int) -> str:
        """보기 텍스트. 범위를 벗어나면 빈 문자열."""
        return self.options[index] if self.has_option(index) else ""
