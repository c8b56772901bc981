from pydantic import ValidationError
import pytest

from app.models.issues.issue import IssueCategory, IssuePriority
from app.schemas.issues.issue_schemas import IssueCreate, IssueUpdate


def test_create_strips_text():
    issue = IssueCreate(
        title="  Broken streetlight  ",
        description=" Dark since Monday ",
        category=IssueCategory.STREETLIGHT,
        latitude=12.9716,
        longitude=77.5946,
        address=" Church Street ",
    )
    assert (issue.title, issue.description, issue.address) == ("Broken streetlight", "Dark since Monday", "Church Street")


def test_create_limits_images():
    with pytest.raises(ValidationError):
        IssueCreate(
            title="Graffiti on wall",
            description="Fresh tags",
            category=IssueCategory.GRAFFITI,
            latitude=0,
            longitude=0,
            address="Station Road",
            images=[f"img-{index}.jpg" for index in range(6)],
        )


def test_update_strips_text():
    update = IssueUpdate(title="  Crater near market ", description=" Wider now ")
    assert (update.title, update.description) == ("Crater near market", "Wider now")


@pytest.mark.parametrize("field", ["title", "description"])
def test_update_rejects_blank_text(field):
    with pytest.raises(ValidationError, match="Field cannot be blank"):
        IssueUpdate(**{field: "   "})


def test_update_leaves_omitted_fields_unset():
    update = IssueUpdate(priority=IssuePriority.HIGH)
    assert update.model_dump(exclude_unset=True) == {"priority": IssuePriority.HIGH}
