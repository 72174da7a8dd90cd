"""HTML to terminal rendering for caat."""

from .blocks import render_blocks, render_code_blocks
from .cleanup import cleanup, decode_entities, remove_hidden_elements
from .codeblock import CodeBlockLayout, layout_code_block, render_code_block
from .html import build_pipeline, render_html_to_terminal
from .inline import render_inline

__all__ = [
    "CodeBlockLayout",
    "build_pipeline",
    "cleanup",
    "decode_entities",
    "layout_code_block",
    "remove_hidden_elements",
    "render_blocks",
    "render_code_block",
    "render_code_blocks",
    "render_html_to_terminal",
    "render_inline",
]
