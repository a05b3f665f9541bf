from .auth_controller import router as auth_router
from .thought_controller import router as thought_router
from .user_controller import router as user_router
from .error_handlers import register_exception_handlers


__all__ = ["auth_router", "thought_router", "user_router", "register_exception_handlers"]
