# Import every model so Base.metadata sees them (create_all / Alembic)
from talentai.models.user import User  # noqa: F401
from talentai.models.job import Job  # noqa: F401
from talentai.models.cv import CVFile, AIParsedData  # noqa: F401
from talentai.models.application import Application  # noqa: F401
from talentai.models.interview import Interview  # noqa: F401
from talentai.models.notification import Notification  # noqa: F401
from talentai.models.report import Report  # noqa: F401
