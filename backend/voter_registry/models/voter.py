"""
Voter record model for the per-registrant partitions in voters_db.

Field aliases are the document keys stored in MongoDB and used on the wire.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VoterFields(BaseModel):
    """All voter attributes; every field is optional."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(None, alias="Name")
    constituency: Optional[str] = Field(None, alias="Constituency")
    ward_no: Optional[int] = Field(None, alias="Ward_No")
    polling_booth_name: Optional[str] = Field(None, alias="Votting_Boothe_Name")
    epic_no: Optional[str] = Field(None, alias="Epic_No", description="Electoral photo ID number")
    middle_name: Optional[str] = Field(None, alias="Middle_Name")
    gender: Optional[str] = Field(None, alias="Gender")
    age: Optional[int] = Field(None, alias="age")
    english_name: Optional[str] = Field(None, alias="English_Name")
    marathi_name: Optional[str] = Field(None, alias="Marathi_Name")


class VoterRecord(VoterFields):
    """
    Voter document as stored in a partition collection.
    """
    id: str = Field(..., alias="_id", description="MongoDB ObjectId as string")
