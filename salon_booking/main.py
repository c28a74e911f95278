import logging

from fastapi import FastAPI

from salon_booking.api.v1.appointments import router as appointments_router
from salon_booking.api.v1.availability import router as availability_router
from salon_booking.api.v1.salon import router as salon_router
from salon_booking.api.v1.services import router as services_router
from salon_booking.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("date", "service_id", "appointment_id", "slot_count", "value", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=f"{settings.SALON_NAME} Booking", version="1.0.0")

app.include_router(services_router, prefix="/api/v1", tags=["services"])
app.include_router(availability_router, prefix="/api/v1", tags=["availability"])
app.include_router(appointments_router, prefix="/api/v1", tags=["appointments"])
app.include_router(salon_router, prefix="/api/v1", tags=["salon"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
