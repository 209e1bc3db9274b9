"""
PDF export of a plan day's reading.

One heading for the day, one section per passage, one paragraph per
verse. Chinese translations are set in ReportLab's built-in STSong-Light
CID font so their glyphs render without extra font files.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from .config import TRANSLATIONS, normalize_translation
from .model import StreakStats
from .passage import DayPassage
from .util import info

CJK_FONT = "STSong-Light"


def _styles(translation_code: str) -> dict:
    styles = getSampleStyleSheet()
    result = {
        "title": styles["Heading1"],
        "heading": styles["Heading2"],
        "normal": styles["Normal"],
        "italic": styles["Italic"],
    }

    meta = TRANSLATIONS.get(normalize_translation(translation_code), {})
    if meta.get("language") == "zh":
        if CJK_FONT not in pdfmetrics.getRegisteredFontNames():
            pdfmetrics.registerFont(UnicodeCIDFont(CJK_FONT))
        result = {
            key: ParagraphStyle(f"{key}-cjk", parent=style, fontName=CJK_FONT)
            for key, style in result.items()
        }
    return result


def export_day_pdf(
    output_path: Path,
    plan_name: str,
    day: int,
    total_days: int,
    translation_code: str,
    passages: List[DayPassage],
    stats: Optional[StreakStats] = None,
) -> Path:
    """
    Write one plan day's passages to a PDF.

    Parameters
    ----------
    output_path:
        Target file; the suffix is forced to `.pdf`.
    plan_name:
        Plan title shown in the heading.
    day, total_days:
        Shown as "Day N of M".
    translation_code:
        Translation of the verse texts (selects the font).
    passages:
        (reference, verses) pairs, as from bduo.passage.get_day_passages.
    stats:
        Optional streak line under the heading.

    Returns
    -------
    Path of the written file.
    """
    translation_code = normalize_translation(translation_code)
    output_path = Path(output_path).with_suffix(".pdf")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    styles = _styles(translation_code)
    story = []

    story.append(Paragraph(escape(plan_name), styles["title"]))
    story.append(
        Paragraph(f"Day {day} of {total_days} ({translation_code})", styles["normal"])
    )
    if stats is not None:
        story.append(
            Paragraph(
                f"Current streak: {stats.current_streak} day(s), "
                f"longest: {stats.longest_streak}, "
                f"completed: {stats.total_completed}",
                styles["italic"],
            )
        )
    story.append(Spacer(1, 12))

    for ref, verses in passages:
        story.append(Paragraph(escape(ref), styles["heading"]))
        if not verses:
            story.append(
                Paragraph("Passage not available in this translation.", styles["italic"])
            )
        chapter = None
        for v in verses:
            if v.chapter != chapter and chapter is not None:
                story.append(Spacer(1, 6))
            chapter = v.chapter
            line = f"{v.chapter}:{v.number}  {escape(v.text)}"
            story.append(Paragraph(line, styles["normal"]))
            story.append(Spacer(1, 2))
        story.append(Spacer(1, 10))

    doc = SimpleDocTemplate(str(output_path), pagesize=LETTER, title=plan_name)
    doc.build(story)

    info(f"PDF exported: {output_path}")
    return output_path
