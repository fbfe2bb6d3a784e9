"""PPT 제안서 덱 생성.

제안서 패키지를 스타일 프로필 팔레트를 입힌 PPTX 슬라이드로 변환합니다.

슬라이드 구성:
1. 표지 (제목 + "Prepared for ...")
2. 스타일 프로필 (팔레트 스와치, 형용사, 모티프, 예식장 유형, 요약)
3. 본문 섹션 (cover 제외, 섹션 유형별 레이아웃)
4. 티저 콘셉트 (티저 포함 옵션일 때만)
5. 마무리 (Book Vision Call)
"""

import io
import logging

from pptx import Presentation
from pptx.chart.data import CategoryChartData
from pptx.dml.color import RGBColor
from pptx.enum.chart import XL_CHART_TYPE
from pptx.enum.shapes import MSO_SHAPE
from pptx.enum.text import PP_ALIGN
from pptx.util import Inches, Pt

from proposal_studio.models import ProposalPackage, ProposalSection, SectionType, ProposalMode

from .assets import (
    TEASER_BUDGET_BANDS,
    FULL_BUDGET_LINES,
    BUDGET_FOOTNOTES,
    MODE_LABELS,
    CONCEPTUAL_LABEL,
    TEASER_CONCEPT_TITLE,
    TEASER_CONCEPT_TEXT,
    CALL_TO_ACTION,
)

logger = logging.getLogger(__name__)


# 라이트 테마 컬러 (강조색은 팔레트에서 가져옴)
COLORS = {
    "background": "FAF7F5",
    "text_primary": "1C1917",
    "text_secondary": "78716C",
}

BLANK_LAYOUT = 6


def hex_to_rgb(hex_color: str) -> RGBColor:
    """Hex 컬러를 RGBColor로 변환."""
    hex_color = hex_color.lstrip('#')
    return RGBColor(
        int(hex_color[0:2], 16),
        int(hex_color[2:4], 16),
        int(hex_color[4:6], 16)
    )


def set_slide_background(slide, color_hex: str):
    """슬라이드 배경색 설정."""
    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = hex_to_rgb(color_hex)


def add_text(slide, left, top, width, height, text: str, size: int,
             color: str, bold: bool = False, align=None):
    """텍스트 상자 추가. 줄바꿈마다 문단을 나눕니다."""
    box = slide.shapes.add_textbox(left, top, width, height)
    tf = box.text_frame
    tf.word_wrap = True
    for i, line in enumerate(text.split("\n")):
        p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
        p.text = line
        p.font.size = Pt(size)
        p.font.bold = bold
        p.font.color.rgb = hex_to_rgb(color)
        if align is not None:
            p.alignment = align
    return box


class ProposalDeckBuilder:
    """제안서 패키지를 PPTX 덱으로 변환."""

    def build(self, package: ProposalPackage) -> bytes:
        """
        PPTX 파일 생성.

        Returns:
            PPTX 바이너리
        """
        prs = Presentation()
        accent = package.style_profile.palette[-1]

        cover = package.get_section("cover")
        self._add_title_slide(prs, package, cover.content if cover else "", accent)
        self._add_style_slide(prs, package)

        for section in package.sections:
            if section.id == "cover":
                continue
            if section.type == SectionType.GALLERY:
                self._add_gallery_slide(prs, section, package)
            elif section.type == SectionType.BUDGET_CHART:
                self._add_budget_slide(prs, section, package.mode)
            else:
                self._add_text_slide(prs, section.title, section.content)

        if package.teaser_included:
            self._add_text_slide(prs, TEASER_CONCEPT_TITLE, TEASER_CONCEPT_TEXT)

        self._add_closing_slide(prs, accent)

        buffer = io.BytesIO()
        prs.save(buffer)
        logger.info(f"[DeckBuilder] 덱 생성 완료: {package.id} ({len(prs.slides)}장)")
        return buffer.getvalue()

    def _new_slide(self, prs):
        slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT])
        set_slide_background(slide, COLORS["background"])
        return slide

    def _add_title_slide(self, prs, package: ProposalPackage, subtitle: str, accent: str):
        slide = self._new_slide(prs)
        add_text(slide, Inches(0.5), Inches(2.2), Inches(9), Inches(0.5),
                 MODE_LABELS[package.mode].upper(), 14, accent, bold=True, align=PP_ALIGN.CENTER)
        add_text(slide, Inches(0.5), Inches(2.8), Inches(9), Inches(1.5),
                 package.title, 40, COLORS["text_primary"], bold=True, align=PP_ALIGN.CENTER)
        if subtitle:
            add_text(slide, Inches(0.5), Inches(4.5), Inches(9), Inches(0.8),
                     subtitle, 20, COLORS["text_secondary"], align=PP_ALIGN.CENTER)
        return slide

    def _add_style_slide(self, prs, package: ProposalPackage):
        profile = package.style_profile
        slide = self._new_slide(prs)
        add_text(slide, Inches(0.5), Inches(0.4), Inches(9), Inches(0.8),
                 "Style Profile", 32, COLORS["text_primary"], bold=True)

        # 팔레트 스와치
        for idx, color in enumerate(profile.palette):
            swatch = slide.shapes.add_shape(
                MSO_SHAPE.OVAL, Inches(0.5 + idx * 1.0), Inches(1.4), Inches(0.8), Inches(0.8)
            )
            swatch.fill.solid()
            swatch.fill.fore_color.rgb = hex_to_rgb(color)
            swatch.line.fill.background()

        details = "\n".join([
            f"Mood: {', '.join(profile.adjectives)}",
            f"Motifs: {', '.join(profile.motifs)}",
            f"Venue Types: {', '.join(profile.venue_types)}",
        ])
        add_text(slide, Inches(0.5), Inches(2.6), Inches(9), Inches(1.6),
                 details, 18, COLORS["text_secondary"])
        add_text(slide, Inches(0.5), Inches(4.4), Inches(9), Inches(2),
                 profile.summary, 20, COLORS["text_primary"])
        return slide

    def _add_text_slide(self, prs, title: str, content: str):
        slide = self._new_slide(prs)
        add_text(slide, Inches(0.5), Inches(0.4), Inches(9), Inches(0.8),
                 title, 32, COLORS["text_primary"], bold=True)
        add_text(slide, Inches(0.5), Inches(1.4), Inches(9), Inches(5.6),
                 content, 16, COLORS["text_secondary"])
        return slide

    def _add_gallery_slide(self, prs, section: ProposalSection, package: ProposalPackage):
        """이미지 대신 팔레트 색상 타일로 무드보드 자리 표시."""
        slide = self._new_slide(prs)
        add_text(slide, Inches(0.5), Inches(0.4), Inches(9), Inches(0.8),
                 section.title, 32, COLORS["text_primary"], bold=True)
        add_text(slide, Inches(0.5), Inches(1.2), Inches(9), Inches(0.6),
                 section.content, 16, COLORS["text_secondary"])

        palette = package.style_profile.palette
        for idx in range(6):
            row, col = divmod(idx, 3)
            tile = slide.shapes.add_shape(
                MSO_SHAPE.ROUNDED_RECTANGLE,
                Inches(0.5 + col * 3.0), Inches(2.0 + row * 2.5), Inches(2.8), Inches(2.3),
            )
            tile.fill.solid()
            tile.fill.fore_color.rgb = hex_to_rgb(palette[idx % len(palette)])
            tile.line.fill.background()
            if package.mode == ProposalMode.TEASER:
                tile.text_frame.text = CONCEPTUAL_LABEL
        return slide

    def _add_budget_slide(self, prs, section: ProposalSection, mode: ProposalMode):
        slide = self._new_slide(prs)
        add_text(slide, Inches(0.5), Inches(0.4), Inches(9), Inches(0.8),
                 section.title, 32, COLORS["text_primary"], bold=True)
        add_text(slide, Inches(0.5), Inches(1.2), Inches(9), Inches(0.6),
                 section.content, 16, COLORS["text_secondary"])

        chart_data = CategoryChartData()
        if mode == ProposalMode.TEASER:
            chart_data.categories = [band["name"] for band in TEASER_BUDGET_BANDS]
            chart_data.add_series("Low", [band["min"] for band in TEASER_BUDGET_BANDS])
            chart_data.add_series("High", [band["max"] for band in TEASER_BUDGET_BANDS])
        else:
            chart_data.categories = [line["name"] for line in FULL_BUDGET_LINES]
            chart_data.add_series("Allocation", [line["amount"] for line in FULL_BUDGET_LINES])

        slide.shapes.add_chart(
            XL_CHART_TYPE.BAR_CLUSTERED,
            Inches(0.5), Inches(2.0), Inches(9), Inches(4.4),
            chart_data,
        )
        add_text(slide, Inches(0.5), Inches(6.6), Inches(9), Inches(0.4),
                 BUDGET_FOOTNOTES[mode], 12, COLORS["text_secondary"], align=PP_ALIGN.CENTER)
        return slide

    def _add_closing_slide(self, prs, accent: str):
        slide = self._new_slide(prs)
        add_text(slide, Inches(0.5), Inches(3.0), Inches(9), Inches(1.5),
                 CALL_TO_ACTION, 48, accent, bold=True, align=PP_ALIGN.CENTER)
        return slide
