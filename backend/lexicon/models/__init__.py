# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant l'appel à create_all au démarrage.

from lexicon.models.user import User  # noqa: F401
from lexicon.models.enrollment import Enrollment  # noqa: F401
from lexicon.models.contact_message import ContactMessage  # noqa: F401
from lexicon.models.course import Course  # noqa: F401
from lexicon.models.session import UserSession  # noqa: F401
