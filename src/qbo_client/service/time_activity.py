from ..model.time_activity import TimeActivity
from .base_service import BaseService


class TimeActivityService(BaseService):
    model = TimeActivity
