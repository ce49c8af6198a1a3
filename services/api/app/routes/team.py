"""Team listing route."""

from fastapi import APIRouter

from .. import catalog
from ..schemas import TeamMemberOut

router = APIRouter(tags=["team"])


@router.api_route("/team", methods=["GET", "HEAD"], response_model=list[TeamMemberOut])
def list_team():
    """List team members with their GitHub and Discord profile links."""
    return catalog.get_team()
