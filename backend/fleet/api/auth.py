"""Authentication API."""
from fastapi import APIRouter, HTTPException, status, Depends
from pydantic import BaseModel, ValidationError
from typing import Optional

from fleet.api.deps import get_users
from fleet.core.security import create_access_token, get_current_user
from fleet.repositories import UserRepository
from fleet.schemas.user import Role, User, UserCreate

router = APIRouter()

class LoginRequest(BaseModel):
    username: str
    password: str

class RegisterRequest(LoginRequest):
    email: Optional[str] = None
    role: Role = "viewer"

class LoginResponse(BaseModel):
    success: bool = True
    user: User
    access_token: str
    token_type: str = "bearer"

@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, users: UserRepository = Depends(get_users)):
    user = users.authenticate(request.username, request.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token(data={"sub": user.username, "role": user.role})
    return LoginResponse(user=user, access_token=token)

@router.post("/register", response_model=User, status_code=201)
def register(request: RegisterRequest, users: UserRepository = Depends(get_users)):
    if len(request.password) < 8:
        raise HTTPException(status_code=400, detail="Password must be at least 8 characters")
    if users.get_by_username(request.username):
        raise HTTPException(status_code=400, detail="User already exists")
    try:
        return users.create(UserCreate(**request.model_dump()))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/me")
async def get_me(current_user: dict = Depends(get_current_user)):
    return {"username": current_user.get("sub"), "role": current_user.get("role")}
