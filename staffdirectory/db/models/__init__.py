from .fe_user import FrontendUser
from .file import File, FileReference
from .staff import Staff
from .department import Department

# tables that depend on fe_users and departments
from .member import Member
