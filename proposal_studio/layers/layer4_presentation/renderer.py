"""Proposal renderer - proposal package to Markdown / HTML documents."""

import html

from proposal_studio.models import ProposalPackage, ProposalSection, SectionType, ProposalMode

from .assets import (
    TEASER_BUDGET_BANDS,
    FULL_BUDGET_LINES,
    BUDGET_FOOTNOTES,
    MODE_LABELS,
    GALLERY_IMAGES,
    CONCEPTUAL_LABEL,
    TEASER_CONCEPT_TITLE,
    TEASER_CONCEPT_TEXT,
    CALL_TO_ACTION,
    format_currency,
)


class ProposalRenderer:
    """
    제안서 패키지를 문서 형태로 변환합니다.

    - cover 섹션은 본문이 아닌 머리글로 표시
    - 티저 모드: 예상 범위 예산, 무드보드 이미지에 "Conceptual" 표시
    - 풀 모드: 확정 금액 예산
    """

    def to_markdown(self, package: ProposalPackage) -> str:
        """마크다운 형식의 제안서 생성."""
        lines = []
        profile = package.style_profile

        # 헤더
        lines.append(f"# {package.title}")
        lines.append("")
        lines.append(f"**{MODE_LABELS[package.mode]}** | {package.created_at.strftime('%Y-%m-%d')}")
        cover = package.get_section("cover")
        if cover:
            lines.append("")
            lines.append(f"*{cover.content}*")
        lines.append("")
        lines.append("---")
        lines.append("")

        # 스타일 프로필
        lines.append("## Style Profile")
        lines.append("")
        lines.append(f"**Palette**: {' '.join(f'`{c}`' for c in profile.palette)}")
        lines.append(f"**Mood**: {', '.join(profile.adjectives)}")
        lines.append(f"**Motifs**: {', '.join(profile.motifs)}")
        lines.append(f"**Venue Types**: {', '.join(profile.venue_types)}")
        lines.append("")
        lines.append(f"> {profile.summary}")
        lines.append("")

        # 본문 섹션
        for section in package.sections:
            if section.id == "cover":
                continue
            lines.append(f"## {section.title}")
            lines.append("")
            lines.extend(self._section_markdown(section, package.mode))
            lines.append("")

        if package.teaser_included:
            lines.append(f"## {TEASER_CONCEPT_TITLE}")
            lines.append("")
            lines.append(TEASER_CONCEPT_TEXT)
            lines.append("")

        lines.append("---")
        lines.append("")
        lines.append(f"**{CALL_TO_ACTION}**")

        return "\n".join(lines)

    def _section_markdown(self, section: ProposalSection, mode: ProposalMode) -> list[str]:
        lines = [section.content] if section.content else []

        if section.type == SectionType.GALLERY:
            lines.append("")
            for idx, url in enumerate(GALLERY_IMAGES, 1):
                label = f" ({CONCEPTUAL_LABEL})" if mode == ProposalMode.TEASER else ""
                lines.append(f"- ![Inspiration {idx}]({url}){label}")

        elif section.type == SectionType.BUDGET_CHART:
            lines.append("")
            if mode == ProposalMode.TEASER:
                lines.append("| Category | Estimated Range |")
                lines.append("|----------|-----------------|")
                for band in TEASER_BUDGET_BANDS:
                    lines.append(
                        f"| {band['name']} | {format_currency(band['min'])} - {format_currency(band['max'])} |"
                    )
            else:
                lines.append("| Category | Allocation |")
                lines.append("|----------|------------|")
                for line in FULL_BUDGET_LINES:
                    lines.append(f"| {line['name']} | {format_currency(line['amount'])} |")
            lines.append("")
            lines.append(BUDGET_FOOTNOTES[mode])

        return lines

    def to_html(self, package: ProposalPackage) -> str:
        """브라우저 보기용 HTML 제안서 생성."""
        esc = html.escape
        profile = package.style_profile
        cover = package.get_section("cover")

        swatches = "".join(
            f'<span class="swatch" style="background:{esc(color)}" title="{esc(color)}"></span>'
            for color in profile.palette
        )

        body = []
        for section in package.sections:
            if section.id == "cover":
                continue
            body.append(f'<section id="{esc(section.id)}">')
            body.append(f"<h2>{esc(section.title)}</h2>")
            body.append(self._section_html(section, package.mode))
            body.append("</section>")

        if package.teaser_included:
            body.append('<section id="teaser-concept">')
            body.append(f"<h2>{TEASER_CONCEPT_TITLE}</h2>")
            body.append(f"<p>{esc(TEASER_CONCEPT_TEXT)}</p>")
            body.append("</section>")

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{esc(package.title)}</title>
    <style>
        body {{ font-family: Georgia, serif; max-width: 800px; margin: 0 auto; padding: 20px; color: #44403c; }}
        h1 {{ color: #1c1917; border-bottom: 2px solid #e7e5e4; padding-bottom: 10px; }}
        .badge {{ text-transform: uppercase; font-size: 0.75em; letter-spacing: 0.1em; color: #78716c; }}
        .swatch {{ display: inline-block; width: 40px; height: 40px; border-radius: 50%; margin-right: 8px; }}
        .gallery {{ display: grid; grid-template-columns: repeat(3, 1fr); gap: 12px; }}
        .gallery img {{ width: 100%; border-radius: 8px; }}
        .footnote {{ font-size: 0.8em; color: #a8a29e; text-align: center; }}
        p.vision {{ white-space: pre-line; }}
    </style>
</head>
<body>
<p class="badge">{MODE_LABELS[package.mode]}</p>
<h1>{esc(package.title)}</h1>
<p><em>{esc(cover.content) if cover else ""}</em></p>
<div class="style-profile">
<div>{swatches}</div>
<p>{esc(", ".join(profile.adjectives))}</p>
<blockquote>{esc(profile.summary)}</blockquote>
</div>
{chr(10).join(body)}
<footer><button>{CALL_TO_ACTION}</button></footer>
</body>
</html>"""

    def _section_html(self, section: ProposalSection, mode: ProposalMode) -> str:
        esc = html.escape
        parts = [f'<p class="vision">{esc(section.content)}</p>'] if section.content else []

        if section.type == SectionType.GALLERY:
            figures = []
            for idx, url in enumerate(GALLERY_IMAGES, 1):
                label = f"<figcaption>{CONCEPTUAL_LABEL}</figcaption>" if mode == ProposalMode.TEASER else ""
                figures.append(f'<figure><img src="{url}" alt="Inspiration {idx}">{label}</figure>')
            parts.append(f'<div class="gallery">{"".join(figures)}</div>')

        elif section.type == SectionType.BUDGET_CHART:
            rows = []
            if mode == ProposalMode.TEASER:
                for band in TEASER_BUDGET_BANDS:
                    rows.append(
                        f"<tr><td>{band['name']}</td>"
                        f"<td>{format_currency(band['min'])} - {format_currency(band['max'])}</td></tr>"
                    )
            else:
                for line in FULL_BUDGET_LINES:
                    rows.append(f"<tr><td>{line['name']}</td><td>{format_currency(line['amount'])}</td></tr>")
            parts.append(f"<table>{''.join(rows)}</table>")
            parts.append(f'<p class="footnote">{BUDGET_FOOTNOTES[mode]}</p>')

        return "\n".join(parts)
