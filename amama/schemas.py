"""
Pydantic schemas for the stored document and the API payloads.

Submitted documents are stored as-is; these models describe the shape the
frontend works with and are used to build the seed document.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Member(BaseModel):
    id: int
    name: str
    joinDate: str
    active: bool = True


class Transaction(BaseModel):
    id: int
    memberId: int
    amount: float
    type: Literal["credit", "debit"]
    description: str = ""
    date: str
    timestamp: str


class Minute(BaseModel):
    id: int
    memberId: int
    content: str
    date: str
    timestamp: str


class Decision(BaseModel):
    id: int
    title: str
    content: str
    date: str
    timestamp: str


class DocumentSettings(BaseModel):
    currency: str
    version: str
    lastBackup: Optional[str] = None


class Document(BaseModel):
    model_config = ConfigDict(extra="allow")

    members: list[Member] = Field(default_factory=list)
    transactions: list[Transaction] = Field(default_factory=list)
    minutes: list[Minute] = Field(default_factory=list)
    decisions: list[Decision] = Field(default_factory=list)
    balances: dict[str, list[float]] = Field(default_factory=dict)
    settings: DocumentSettings
    lastUpdated: Optional[str] = None


class DataResponse(BaseModel):
    success: Literal[True] = True
    data: dict
    timestamp: str


class SaveResponse(BaseModel):
    success: Literal[True] = True
    message: str
    data: dict
    timestamp: str


class BackupResponse(BaseModel):
    success: Literal[True] = True
    data: dict
    timestamp: str
    filename: str


class VerifyPasswordRequest(BaseModel):
    password: str = ""


class VerifyPasswordResponse(BaseModel):
    success: bool


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: str
    dataFile: str
    dataSize: int


class HelloResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
