# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: the member form.

One page with the id, username, name, email, phone and date-of-birth fields
and four actions (list, create, update, delete). Every action answers with
the same page plus a modal notification.
"""
from datetime import date
from html import escape
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Form
from starlette.responses import HTMLResponse

from member_service.core.dependencies import get_member_service
from member_service.errors import MemberError
from member_service.models.domain import Member, MemberRecord
from member_service.services.member_service import MemberService

router = APIRouter(tags=["Form"])

FORM_ACTIONS = ("list", "create", "update", "delete")

_STYLE = """
    body { font-family: -apple-system, 'Segoe UI', Roboto, sans-serif; background: #0f172a;
           color: #e2e8f0; padding: 2rem; }
    form { display: grid; grid-template-columns: 10rem 16rem; gap: 0.5rem; }
    .actions { grid-column: 1 / span 2; display: flex; gap: 0.5rem; margin-top: 1rem; }
    table { margin-top: 2rem; border-collapse: collapse; }
    th, td { border: 1px solid #334155; padding: 0.4rem 0.8rem; }
    dialog { border-radius: 0.75rem; border: 1px solid #334155; min-width: 20rem; }
    dialog.error h2 { color: #dc2626; }
    dialog.success h2 { color: #059669; }
    dialog p { white-space: pre-line; }
"""


def _notification(title: str, message: str, kind: str) -> Dict[str, str]:
    return {"title": title, "message": message, "kind": kind}


def _render_fields(values: Dict[str, str]) -> str:
    def field(label: str, name: str, input_type: str = "text") -> str:
        return (
            f'<label for="{name}">{label}</label>'
            f'<input id="{name}" name="{name}" type="{input_type}" '
            f'value="{escape(values.get(name, ""), quote=True)}">'
        )

    buttons = "".join(
        f'<button type="submit" name="action" value="{a}">{a.capitalize()}</button>'
        for a in FORM_ACTIONS
    )
    return (
        '<form method="post" action="/form">'
        + field("ID", "user_id")
        + field("Username", "username")
        + field("Name", "name")
        + field("Email", "email")
        + field("Phone number", "phone_number")
        + field("Date of birth", "date_of_birth", "date")
        + f'<div class="actions">{buttons}</div></form>'
    )


def _render_table(members: List[MemberRecord]) -> str:
    head = "".join(
        f"<th>{h}</th>"
        for h in ("userid", "username", "name", "email", "phonenumber", "dateofbirth")
    )
    rows = "".join(
        "<tr>"
        f"<td>{m.user_id}</td><td>{escape(m.username)}</td><td>{escape(m.name)}</td>"
        f"<td>{escape(m.email)}</td><td>{escape(m.phone_number)}</td>"
        f"<td>{m.date_of_birth.isoformat()}</td>"
        "</tr>"
        for m in members
    )
    return f"<table><thead><tr>{head}</tr></thead><tbody>{rows}</tbody></table>"


def _render_dialog(note: Dict[str, str]) -> str:
    return (
        f'<dialog open class="{note["kind"]}">'
        f'<h2>{escape(note["title"])}</h2><p>{escape(note["message"])}</p>'
        '<form method="dialog"><button>OK</button></form></dialog>'
    )


def render_page(values: Optional[Dict[str, str]] = None,
                notification: Optional[Dict[str, str]] = None,
                members: Optional[List[MemberRecord]] = None) -> str:
    values = values or {"date_of_birth": date.today().isoformat()}
    body = _render_fields(values)
    if members is not None:
        body += _render_table(members)
    if notification is not None:
        body += _render_dialog(notification)
    return (
        "<!DOCTYPE html><html lang=\"en\"><head><meta charset=\"UTF-8\">"
        f"<title>Members</title><style>{_STYLE}</style></head>"
        f"<body><h1>Members</h1>{body}</body></html>"
    )


@router.get("/", response_class=HTMLResponse)
def index():
    return render_page()


@router.post("/form", response_class=HTMLResponse)
def submit_form(
    action: str = Form(...),
    user_id: str = Form(""),
    username: str = Form(""),
    name: str = Form(""),
    email: str = Form(""),
    phone_number: str = Form(""),
    date_of_birth: Optional[date] = Form(None),
    service: MemberService = Depends(get_member_service),
):
    # an empty date input falls back to today
    dob = date_of_birth or date.today()
    values = {
        "user_id": user_id, "username": username, "name": name, "email": email,
        "phone_number": phone_number, "date_of_birth": dob.isoformat(),
    }
    member = Member(
        username=username, name=name, email=email,
        phone_number=phone_number, date_of_birth=dob,
    )
    members = None

    try:
        if action == "list":
            members = service.list_members()
            note = None
        elif action == "create":
            service.create_member(member)
            note = _notification(
                "Success", "User insertion has been done successfully.", "success")
        elif action == "update":
            # field errors are reported before the id is parsed
            service.validate(member, "update")
            service.update_member(int(user_id), member)
            note = _notification(
                "Success", "User has been updated successfully.", "success")
        elif action == "delete":
            service.delete_member(int(user_id))
            note = _notification(
                "Success", "Record has been deleted successfully.", "success")
        else:
            note = _notification("Error", f"Unknown action '{action}'.", "error")
    except MemberError as exc:
        note = _notification(exc.title, str(exc), "error")

    return render_page(values, note, members)
