"""Schemas for the simulated payment and membership upgrade flow."""

from pydantic import BaseModel, Field


class TransactionRequest(BaseModel):
    amount: float = Field(..., allow_inf_nan=False, description="Nominal pembayaran (minimal 50000)")


class TransactionToken(BaseModel):
    token: str


class TransactionResponse(BaseModel):
    success: bool = True
    message: str = "Transaksi berhasil. Gunakan token ini untuk upgrade ke premium."
    data: TransactionToken


class UpgradeRequest(BaseModel):
    token: str = Field(..., min_length=1)


class UpgradeData(BaseModel):
    id_user: int
    membership: str


class UpgradeResponse(BaseModel):
    success: bool = True
    message: str = "Membership berhasil diupgrade ke premium"
    data: UpgradeData
