"""Pydantic DTOs for the machine-readable (JSON) output format."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel

from projectdump.domain.entities import ProjectScan
from projectdump.services.security_sentinel import sanitize
from projectdump.services.tree_builder import build_tree, render_tree


class TechnologyModel(BaseModel):
    name: str
    confidence: float
    description: str
    files: list[str]


class FileModel(BaseModel):
    path: str
    size: int
    language: str
    content: str


class ProjectSummaryModel(BaseModel):
    """Summary statistics of one scanned project."""

    root: str
    primary_language: str
    total_files: int
    processed_files: int
    total_size: int
    technologies: list[TechnologyModel]


class ProjectModel(BaseModel):
    summary: ProjectSummaryModel
    tree: str
    files: list[FileModel]

    @classmethod
    def from_scan(cls, scan: ProjectScan, redact_secrets: bool = False) -> ProjectModel:
        s = scan.summary
        return cls(
            summary=ProjectSummaryModel(
                root=s.root,
                primary_language=s.primary_language,
                total_files=s.total_files,
                processed_files=s.processed_files,
                total_size=s.total_size,
                technologies=[
                    TechnologyModel(
                        name=t.name,
                        confidence=t.confidence,
                        description=t.description,
                        files=list(t.files),
                    )
                    for t in s.technologies
                ],
            ),
            tree=render_tree(build_tree(scan.files)),
            files=[
                FileModel(
                    path=f.path,
                    size=f.size,
                    language=f.language,
                    content=sanitize(f.content).clean_text if redact_secrets else f.content,
                )
                for f in scan.files
            ],
        )


class DumpResponse(BaseModel):
    """Top-level JSON document: generation time plus one entry per project."""

    generated_on: str
    projects: list[ProjectModel]

    @classmethod
    def from_scans(
        cls,
        scans: Sequence[ProjectScan],
        generated_on: str,
        redact_secrets: bool = False,
    ) -> DumpResponse:
        return cls(
            generated_on=generated_on,
            projects=[ProjectModel.from_scan(scan, redact_secrets) for scan in scans],
        )
