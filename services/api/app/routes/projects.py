"""Project listing route.

Serves the fixed project catalog shown on the site's projects section.
"""

from fastapi import APIRouter

from .. import catalog
from ..schemas import ProjectOut

router = APIRouter(tags=["projects"])


@router.api_route("/projects", methods=["GET", "HEAD"], response_model=list[ProjectOut])
def list_projects():
    """List the collective's projects.

    Returns:
        list: Project records in catalog order (VantaOS, GhostShare, VailUI, VBoot).
    """
    return catalog.get_projects()
