"""Ingestion pipeline — decoding and normalizing raw prompt sources."""

from prompt_gallery.ingest.csv_decoder import decode
from prompt_gallery.ingest.frontmatter import parse_markdown_prompt, split_front_matter
from prompt_gallery.ingest.normalizer import MarkdownRenderer, PromptNormalizer, normalize, slugify, split_tags

__all__ = [
    "MarkdownRenderer",
    "PromptNormalizer",
    "decode",
    "normalize",
    "parse_markdown_prompt",
    "slugify",
    "split_front_matter",
    "split_tags",
]
