# /portal/db/base.py

# Central registry for all SQLAlchemy models. Importing this module guarantees
# that `Base.metadata` knows every table, both for `create_all` at start-up
# and for Alembic's autogenerate scan.

from .base_class import Base

from .models.profile_models import AuthUser, Profile
from .models.content_models import Assignment, Quiz, Project
from .models.submission_models import Submission, QuizSubmission, ProjectSubmission, Grade
from .models.attendance_models import Attendance
