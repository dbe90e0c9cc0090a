class ServiceError(Exception):
    def __init__(self, code="SERVICE_ERROR", message="Service error", details=None, status=400):
        self.code = code
        self.message = message
        self.details = details or {}
        self.status = status
        super().__init__(message)


class NotFoundError(ServiceError):
    def __init__(self, resource, resource_id=None):
        details = {"id": resource_id} if resource_id is not None else None
        super().__init__("NOT_FOUND", f"{resource} not found", details=details, status=404)
