"""Resume routes: catalogs, generation, tailoring and the resume manager."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi import Path as PathParam
from fastapi.responses import PlainTextResponse

from zcv.api.dependencies import get_store, to_http_exception
from zcv.api.schemas.common import DirectoryRequest
from zcv.api.schemas.resumes import (
    AnalyzeRequest,
    ContentSelectionSchema,
    DownloadResponse,
    GenerateResumeRequest,
    JDAnalysisResponse,
    RoleResponse,
    SelectResumeRequest,
    TailorResponse,
    TailorResumeRequest,
    TemplateResponse,
)
from zcv.constants.roles import list_roles
from zcv.models import GeneratedResume, ZcvError
from zcv.services import jd_tailoring, resume_manager
from zcv.services.resume_generator import ContentSelection, ResumeRequest, generate_resume
from zcv.services.resume_manager import ResumeFilter, ResumeSort
from zcv.state import ZcvStore
from zcv.templates import list_templates, recommend_templates

router = APIRouter(prefix="/resumes", tags=["resumes"])

StoreDep = Annotated[ZcvStore, Depends(get_store)]
ResumeId = Annotated[str, PathParam(description="Resume id")]


def _selection(schema: ContentSelectionSchema) -> ContentSelection:
    return ContentSelection(
        experiences=list(schema.experiences),
        projects=list(schema.projects),
        skills=list(schema.skills),
        achievements=list(schema.achievements),
    )


# --- static paths MUST come before /{resume_id} to avoid path conflicts ---


@router.get("", response_model=list[GeneratedResume], summary="List resumes")
def list_resumes(
    store: StoreDep,
    search: Annotated[str, Query(description="Matches name, role or company")] = "",
    kind: Annotated[ResumeFilter, Query(alias="type")] = ResumeFilter.ALL,
    sort_by: Annotated[ResumeSort, Query(alias="sortBy")] = ResumeSort.DATE,
) -> list[GeneratedResume]:
    return resume_manager.filter_resumes(store.state.resumes, search, kind, sort_by)


@router.get("/roles", response_model=list[RoleResponse], summary="Target role catalog")
def get_roles() -> list[RoleResponse]:
    return [
        RoleResponse(
            id=r.id, title=r.title, description=r.description, key_skills=list(r.key_skills)
        )
        for r in list_roles()
    ]


@router.get("/templates", response_model=list[TemplateResponse], summary="Template catalog")
def get_templates(
    role: Annotated[str, Query(description="Role used to flag recommended templates")] = "",
) -> list[TemplateResponse]:
    recommended = {t.id for t in recommend_templates(role)}
    return [
        TemplateResponse(
            id=t.id,
            name=t.name,
            description=t.description,
            best_for=list(t.best_for),
            features=list(t.features),
            recommended=t.id in recommended,
        )
        for t in list_templates()
    ]


@router.post(
    "/generate",
    response_model=GeneratedResume,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a role-based resume",
)
def generate(store: StoreDep, request: GenerateResumeRequest) -> GeneratedResume:
    resume_request = ResumeRequest(
        role=request.role,
        template=request.template,
        selection=_selection(request.selection),
    )
    try:
        return generate_resume(store, resume_request)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc


@router.post("/analyze", response_model=JDAnalysisResponse, summary="Analyze a job description")
def analyze(store: StoreDep, request: AnalyzeRequest) -> JDAnalysisResponse:
    try:
        analysis = jd_tailoring.analyze_job_description(request.job_description, store)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    company, position = jd_tailoring.extract_company_and_position(request.job_description)
    return JDAnalysisResponse(
        keywords=analysis.keywords,
        requirements=analysis.requirements,
        suggestions=analysis.suggestions,
        company=company,
        position=position,
    )


@router.post(
    "/tailor",
    response_model=TailorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a resume tailored to a job description",
)
def tailor(store: StoreDep, request: TailorResumeRequest) -> TailorResponse:
    selection = _selection(request.selection) if request.selection else None
    try:
        resume, analysis = jd_tailoring.tailor_resume(
            store,
            request.job_description,
            template=request.template,
            company=request.company,
            position=request.position,
            selection=selection,
        )
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    return TailorResponse(
        resume=resume,
        analysis=JDAnalysisResponse(
            keywords=analysis.keywords,
            requirements=analysis.requirements,
            suggestions=analysis.suggestions,
            company=resume.target_company,
            position=resume.target_role,
        ),
    )


@router.put("/selected", summary="Select a resume (or clear the selection)")
def select(store: StoreDep, request: SelectResumeRequest) -> dict[str, str | None]:
    try:
        resume_manager.select_resume(store, request.resume_id)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    return {"selectedResumeId": store.state.selected_resume_id}


# --- per-resume routes ---


@router.get("/{resume_id}", response_model=GeneratedResume, summary="Get a resume")
def get_resume(store: StoreDep, resume_id: ResumeId) -> GeneratedResume:
    try:
        return resume_manager.get_resume(store, resume_id)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc


@router.get("/{resume_id}/latex", response_class=PlainTextResponse, summary="LaTeX source")
def get_latex(store: StoreDep, resume_id: ResumeId) -> str:
    try:
        return resume_manager.get_resume(store, resume_id).latex
    except ZcvError as exc:
        raise to_http_exception(exc) from exc


@router.post("/{resume_id}/download", response_model=DownloadResponse, summary="Write .tex file")
def download(
    store: StoreDep, resume_id: ResumeId, request: DirectoryRequest | None = None
) -> DownloadResponse:
    directory = Path(request.directory) if request and request.directory else None
    try:
        path = resume_manager.download_resume(store, resume_id, directory)
        count = resume_manager.get_resume(store, resume_id).download_count
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    return DownloadResponse(path=str(path), download_count=count)


@router.post(
    "/{resume_id}/duplicate",
    response_model=GeneratedResume,
    status_code=status.HTTP_201_CREATED,
    summary="Duplicate a resume",
)
def duplicate(store: StoreDep, resume_id: ResumeId) -> GeneratedResume:
    try:
        return resume_manager.duplicate_resume(store, resume_id)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc


@router.delete(
    "/{resume_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a resume",
)
def delete(store: StoreDep, resume_id: ResumeId) -> Response:
    try:
        resume_manager.delete_resume(store, resume_id)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
