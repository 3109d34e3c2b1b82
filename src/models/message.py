from sqlmodel import SQLModel


class MessageOutput(SQLModel):
    message: str
