from fastapi import APIRouter
from medscribe.__init__ import API_PREFIX
from medscribe.auth.routes import auth_router
from medscribe.otp.routes import otp_router
from medscribe.notifications.routes import notifications_router, appointments_router
from medscribe.profiles.routes import patient_router, doctor_router, pharmacy_router
from medscribe.common.routes import home_router


public_routers = APIRouter(prefix=API_PREFIX)


public_routers.include_router(auth_router, prefix="/auth", tags=["auth"])
public_routers.include_router(otp_router, prefix="/auth", tags=["otp"])
public_routers.include_router(notifications_router, prefix="/auth", tags=["notifications"])
public_routers.include_router(patient_router, prefix="/patient", tags=["patient"])
public_routers.include_router(doctor_router, prefix="/doctor", tags=["doctor"])
public_routers.include_router(pharmacy_router, prefix="/pharmacy", tags=["pharmacy"])
public_routers.include_router(appointments_router, prefix="/appointments", tags=["appointments"])
public_routers.include_router(home_router, tags=["home"])
