"""Display toggle and plain-text formatting for generated scripts."""
from __future__ import annotations

from typing import Iterable, List, Optional

from script_sanitizer.generation.models import Script
from script_sanitizer.rewriting.rewriter import TermRewriter, filter_scripts

EXPORT_SEPARATOR = "\n\n" + "-" * 40 + "\n\n"


def displayed_scripts(
    scripts: Optional[Iterable[Script]],
    filter_enabled: bool = True,
    rewriter: Optional[TermRewriter] = None,
) -> Optional[List[Script]]:
    """Scripts as they should be shown: filtered when the toggle is on, verbatim otherwise."""
    if scripts is None:
        return None
    if not filter_enabled:
        return list(scripts)
    if rewriter is None:
        return filter_scripts(scripts)
    return rewriter.filter_scripts(scripts)


def format_script_for_copy(script: Script) -> str:
    """Clipboard layout of one script.

    Title, hook, numbered scenes and CTA follow the script card layout.
    Post content and hashtags are extra sections appended after the CTA,
    each only when the script has one.
    """
    text = f"**{script.title}**\n\n"
    text += f"**Mở đầu (Hook):**\n{script.hook}\n\n"
    text += "**Các cảnh:**\n"
    for i, scene in enumerate(script.scenes, 1):
        text += f"Cảnh {i}:\n"
        text += f"- Hình ảnh: {scene.visual}\n"
        text += f"- Lời thoại: {scene.voiceover}\n\n"
    text += f"**Kêu gọi hành động (CTA):**\n{script.cta}"
    if script.post_content:
        text += f"\n\n**Nội dung bài đăng:**\n{script.post_content}"
    if script.hashtags:
        text += "\n\n**Hashtags:**\n" + " ".join(script.hashtags)
    return text


def export_scripts_text(scripts: Iterable[Script]) -> str:
    """All scripts in copy layout, for a plain-text file download."""
    return EXPORT_SEPARATOR.join(format_script_for_copy(script) for script in scripts)
