from .urgency import Urgency as Urgency
