from .user import User
from .evaluator import Evaluator
from .vendor import Vendor
from .evaluation import Evaluation
from .vote import VendorVote
from .document import Document
from .chat import ChatMessage, ChatNotification
from .admin_settings import AdminSettings
from .deployment_error import DeploymentError
# base is imported by the above as needed
