from pydantic import BaseModel


class UserRegister(BaseModel):
    name: str
    username: str
    password: str
    email: str
    phoneNumber: str


class UserLogin(BaseModel):
    email: str
    password: str


class ProfileResponse(BaseModel):
    name: str | None = None
    username: str
    email: str
    phoneNumber: str | None = None

    class Config:
        from_attributes = True


class ChangePassword(BaseModel):
    username: str
    password: str
