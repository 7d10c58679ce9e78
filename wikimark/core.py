"""
Wikimark Core Engine

Detects which markup a file is written in and routes it to the matching
converter: Wiki files become Markdown, Markdown files become Wiki markup.
Either can be rendered to HTML instead. Accepts single files or whole
directories.
"""

import os
from datetime import datetime, timezone
from typing import Optional

from .converters.markdown_converter import MarkdownConverter
from .converters.wiki_converter import WikiConverter
from .rendering import PresentationBridge

HTML_EXTENSION = ".html"


class Transliterator:
    """
    Main conversion engine.

    Accepts a file or directory path and produces the converted markup.
    """

    def __init__(self, output_dir: str = None, bridge: Optional[PresentationBridge] = None):
        self.output_dir = output_dir or os.path.join(os.getcwd(), "wikimark_output")
        self._bridge = bridge

    @property
    def bridge(self) -> PresentationBridge:
        # Built on first HTML request so plain conversion needs no renderer
        if self._bridge is None:
            self._bridge = PresentationBridge()
        return self._bridge

    def convert(self, source: str, save: bool = True, html: bool = False) -> str:
        """
        Convert a file or directory.

        Args:
            source: File or directory path
            save: If True, write the result into the output directory
            html: If True, render HTML instead of the other markup

        Returns:
            The converted text
        """
        source = source.strip()

        if os.path.isdir(source):
            print(f"[DIR] Converting all supported files in: {source}")
            return self.convert_directory(source, save=save, html=html)

        if not os.path.isfile(source):
            raise ValueError(
                f"Cannot handle source: {source}\n"
                f"Provide a valid file or directory path."
            )

        text, out_ext = self._convert_file(source, html)
        if save:
            self._save(text, _output_name(source, out_ext))
        return text

    def convert_directory(self, dir_path: str, save: bool = True, html: bool = False) -> str:
        """Convert all supported files in a directory."""
        results = []
        converted_count = 0

        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            if not os.path.isfile(file_path) or _converter_for(file_path) is None:
                continue

            try:
                text, out_ext = self._convert_file(file_path, html)
            except (OSError, UnicodeDecodeError) as e:
                print(f"[ERROR] Failed to convert {filename}: {e}")
                continue

            if save:
                self._save(text, _output_name(file_path, out_ext))
            results.append(text)
            converted_count += 1

        print(
            f"[DONE] {converted_count} file(s) converted from {dir_path} "
            f"at {datetime.now(timezone.utc).isoformat()}"
        )
        return "\n\n".join(results)

    def _convert_file(self, file_path: str, html: bool) -> tuple[str, str]:
        """Route a file to its converter. Returns the text and output extension."""
        converter = _converter_for(file_path)
        if converter is None:
            raise ValueError(f"Unsupported file type: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()

        if converter is WikiConverter:
            print(f"[WIKI] Converting: {file_path}")
            if html:
                return self.bridge.wiki_to_html(content), HTML_EXTENSION
        else:
            print(f"[MD] Converting: {file_path}")
            if html:
                return self.bridge.markdown_to_html(content), HTML_EXTENSION

        return converter.convert(content), converter.OUTPUT_EXTENSION

    def _save(self, text: str, out_name: str) -> None:
        os.makedirs(self.output_dir, exist_ok=True)
        out_path = os.path.join(self.output_dir, out_name)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"[SAVED] {out_path}")

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of all supported formats."""
        return {
            "Wiki markup (to Markdown)": sorted(WikiConverter.SUPPORTED_EXTENSIONS),
            "Markdown (to Wiki markup)": sorted(MarkdownConverter.SUPPORTED_EXTENSIONS),
            "HTML output": ["any of the above"],
        }


def _converter_for(file_path: str):
    if WikiConverter.can_handle(file_path):
        return WikiConverter
    if MarkdownConverter.can_handle(file_path):
        return MarkdownConverter
    return None


def _output_name(file_path: str, out_ext: str) -> str:
    """Generate an output filename from the source file."""
    basename = os.path.basename(file_path)
    name, _ = os.path.splitext(basename)
    safe_name = "".join(c if c.isalnum() or c in "-_ " else "_" for c in name)
    return f"{safe_name}{out_ext}"
