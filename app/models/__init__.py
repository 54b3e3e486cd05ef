# Fleet verification — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.profile import Profile       # noqa
from app.models.vehicle import Vehicle       # noqa
from app.models.material import Material     # noqa
from app.models.personnel import Personnel   # noqa
