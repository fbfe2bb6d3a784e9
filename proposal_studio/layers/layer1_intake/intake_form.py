"""Multi-step intake collector.

인테이크 폼은 3단계로 진행됩니다.

┌──────┬──────────────────────────────────────┬─────────────────────────────┐
│ 단계 │ 입력 항목                            │ 다음 단계 진행 조건         │
├──────┼──────────────────────────────────────┼─────────────────────────────┤
│ 1    │ 커플 이름, 이메일, 날짜/시즌, 지역   │ 커플 이름과 이메일 입력     │
│ 2    │ 하객 수 구간, 예산 구간              │ 두 구간 모두 선택           │
│ 3    │ 분위기 태그, 메모                    │ 태그 1개 이상 선택 시 제출  │
└──────┴──────────────────────────────────────┴─────────────────────────────┘
"""

import logging
from typing import Optional

from pydantic import ValidationError

from proposal_studio.exceptions import IntakeValidationError
from proposal_studio.models import IntakeData, VIBE_TAGS
from proposal_studio.utils import summarize_validation_error

logger = logging.getLogger(__name__)

FIRST_STEP = 1
LAST_STEP = 3

# 단계별로 입력받는 필드
STEP_FIELDS = {
    1: ("couple_name", "email", "event_date", "location"),
    2: ("guest_count", "budget_band"),
    3: ("vibe_tags", "notes"),
}


class IntakeForm:
    """
    인테이크 입력을 단계별로 모으는 폼 상태입니다.

    제출에 성공하면 변경 불가능한 IntakeData를 반환합니다.
    """

    def __init__(self):
        self.step = FIRST_STEP
        self.fields: dict[str, str] = {
            "couple_name": "",
            "email": "",
            "event_date": "",
            "location": "",
            "guest_count": "",
            "budget_band": "",
            "notes": "",
        }
        self.vibe_tags: list[str] = []

    def update(self, **values: str) -> None:
        """텍스트/선택 필드 값 변경."""
        for name, value in values.items():
            if name not in self.fields:
                raise IntakeValidationError(
                    f"알 수 없는 인테이크 필드입니다: {name}",
                    details={"field": name},
                )
            self.fields[name] = value

    def toggle_tag(self, tag: str) -> bool:
        """
        분위기 태그 선택/해제.

        Returns:
            토글 후 선택 상태
        """
        if tag not in VIBE_TAGS:
            raise IntakeValidationError(
                f"알 수 없는 분위기 태그입니다: {tag}",
                details={"tag": tag, "allowed": list(VIBE_TAGS)},
            )
        if tag in self.vibe_tags:
            self.vibe_tags.remove(tag)
            return False
        self.vibe_tags.append(tag)
        return True

    def is_step_complete(self, step: Optional[int] = None) -> bool:
        """해당 단계의 진행 조건 충족 여부."""
        step = self.step if step is None else step
        if step == 1:
            return bool(self.fields["couple_name"].strip() and self.fields["email"].strip())
        if step == 2:
            return bool(self.fields["guest_count"] and self.fields["budget_band"])
        if step == 3:
            return len(self.vibe_tags) > 0
        return False

    def next_step(self) -> int:
        """
        다음 단계로 이동.

        Raises:
            IntakeValidationError: 현재 단계가 완료되지 않았거나 마지막 단계인 경우
        """
        if self.step >= LAST_STEP:
            raise IntakeValidationError("마지막 단계입니다. 제출해 주세요")
        if not self.is_step_complete():
            raise IntakeValidationError(
                f"{self.step}단계 필수 항목이 비어 있습니다",
                details={"step": self.step, "fields": list(STEP_FIELDS[self.step])},
            )
        self.step += 1
        return self.step

    def previous_step(self) -> int:
        """이전 단계로 이동 (1단계 아래로는 내려가지 않음)."""
        self.step = max(FIRST_STEP, self.step - 1)
        return self.step

    def submit(self) -> IntakeData:
        """
        인테이크 제출.

        Returns:
            검증된 IntakeData

        Raises:
            IntakeValidationError: 필수 항목 누락 또는 형식 오류
        """
        if self.step != LAST_STEP or not self.is_step_complete(LAST_STEP):
            raise IntakeValidationError(
                "분위기 태그를 1개 이상 선택해야 제출할 수 있습니다",
                details={"step": self.step},
            )

        try:
            intake = IntakeData(**self.fields, vibe_tags=self.vibe_tags)
        except ValidationError as e:
            raise IntakeValidationError(
                "인테이크 입력값이 올바르지 않습니다",
                details=summarize_validation_error(e),
            ) from e

        logger.info(f"[IntakeForm] 제출 완료: {intake.couple_name}")
        return intake
