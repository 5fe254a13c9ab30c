# emilio/components/generation/models.py
"""
Data models for generated projects.

This module defines the structured form of a model response, extracted to
avoid circular dependencies between the parser, the preview and the exporter.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from emilio.constants import DEFAULT_FILE_LANG, DEFAULT_FILE_NAME


class CodeFile(BaseModel):
    """One generated file."""
    name: str = Field(DEFAULT_FILE_NAME, description="Relative path/filename of the file")
    lang: str = Field(DEFAULT_FILE_LANG, description="Language identifier used for highlighting")
    content: str = Field("", description="File body, trimmed of outer whitespace")


class Sections(BaseModel):
    """The four free-form regions of a response, before code extraction."""
    header: str = Field("", description="Summary block")
    structure: str = Field("", description="Project tree description")
    files: str = Field("", description="Region holding the fenced code blocks")
    notes: str = Field("", description="Rationale and notes")


class StructuredDocument(BaseModel):
    """A model response decomposed into header, structure, notes and files."""
    header: str = Field("", description="Summary block; may be empty")
    structure: str = Field("", description="Project tree description; may be empty")
    notes: str = Field("", description="Rationale and notes; may be empty")
    files: List[CodeFile] = Field(default_factory=list, description="Files in order of appearance")

    @property
    def has_files(self) -> bool:
        """Whether the document can be rendered at all."""
        return len(self.files) > 0

    def find_file(self, name: str) -> Optional[CodeFile]:
        """Return the first file with exactly this name."""
        for code_file in self.files:
            if code_file.name == name:
                return code_file
        return None

    def notes_markdown(self) -> str:
        """Header and notes as one Markdown text."""
        return f"{self.header}\n\n{self.notes}"
