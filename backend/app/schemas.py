from pydantic import BaseModel, ConfigDict
from typing import Dict, Any, List, Optional


class Symmetry(BaseModel):
    model_config = ConfigDict(extra="allow")

    crystal_system: Optional[str] = None
    symbol: Optional[str] = None


class MaterialRecord(BaseModel):
    """Display fields of one oxidation states document; upstream owns the rest."""
    model_config = ConfigDict(extra="allow")

    material_id: str
    formula_pretty: Optional[str] = None
    volume: Optional[float] = None
    density: Optional[float] = None
    symmetry: Optional[Symmetry] = None
    average_oxidation_states: Dict[str, float] = {}


class OxidationStateSearchResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: List[MaterialRecord] = []


class ErrorResponse(BaseModel):
    # Either a message or the upstream error body, relayed as-is
    error: Any


class StatusResponse(BaseModel):
    message: str
    version: str
    status: str
