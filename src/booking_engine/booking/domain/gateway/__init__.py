from .submission_gateway import SubmissionGateway as SubmissionGateway
