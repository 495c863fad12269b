from fastapi import APIRouter, Request, Depends, Form, HTTPException, Response
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from relaydesk.core.http import require
from relaydesk.db.session import get_db
from relaydesk.schemas.org import OrgIn, OrgOut
from relaydesk.services import orgs as org_service
from relaydesk.services.orgs import OrgExistsError, OrgNameError

SKELETON_ROWS = 5

router = APIRouter(prefix="/orgs", tags=["orgs"])
api_router = APIRouter(prefix="/api/orgs", tags=["orgs"])


def _create(db: Session, name: str):
    try:
        return org_service.create_org(db, name)
    except OrgNameError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except OrgExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc))


# ---- HTML (HTMX) ----

@router.get("", response_class=HTMLResponse)
def page(request: Request):
    # Rows are fetched by HTMX on load; skeletons fill the table meanwhile.
    return request.app.state.templates.TemplateResponse(
        request, "orgs/index.html", {"skeleton_rows": SKELETON_ROWS}
    )

@router.get("/rows", response_class=HTMLResponse)
def rows(request: Request, db: Session = Depends(get_db)):
    orgs = org_service.list_orgs(db)
    return request.app.state.templates.TemplateResponse(request, "orgs/_rows.html", {"orgs": orgs})

@router.post("", response_class=HTMLResponse)
def create(request: Request, name: str = Form(""), db: Session = Depends(get_db)):
    org = _create(db, name)
    return request.app.state.templates.TemplateResponse(request, "orgs/_row.html", {"org": org})

@router.delete("/{org_id}", response_class=HTMLResponse)
def delete(org_id: int, db: Session = Depends(get_db)):
    org_service.delete_org(db, org_id)
    return HTMLResponse("")


# ---- JSON API ----

@api_router.get("", response_model=list[OrgOut])
def list_orgs(db: Session = Depends(get_db)):
    return org_service.list_orgs(db)

@api_router.post("", response_model=OrgOut, status_code=201)
def create_org(payload: OrgIn, db: Session = Depends(get_db)):
    return _create(db, payload.name)

@api_router.get("/{org_id}", response_model=OrgOut)
def get_org(org_id: int, db: Session = Depends(get_db)):
    org = org_service.get_org(db, org_id)
    require(org is not None, "Organization not found", status_code=404)
    return org

@api_router.put("/{org_id}", response_model=OrgOut)
def update_org(org_id: int, payload: OrgIn, db: Session = Depends(get_db)):
    try:
        org = org_service.update_org(db, org_id, payload.name)
    except OrgNameError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except OrgExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    require(org is not None, "Organization not found", status_code=404)
    return org

@api_router.delete("/{org_id}", status_code=204)
def delete_org(org_id: int, db: Session = Depends(get_db)):
    org_service.delete_org(db, org_id)
    return Response(status_code=204)
