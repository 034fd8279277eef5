"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par le décodeur et l'encodeur :

CreateTaskRequest → corps POST

UpdateTaskRequest → corps PUT / PATCH

DeleteTaskRequest → corps DELETE

TaskView → réponse de l’API

Sépare les modèles "de stockage" (ORM) de ceux "de transfert" (I/O API).

🔹 Règles communes aux requêtes :

extra="forbid" : tout champ inconnu est refusé.

strict=True : pas de conversion implicite ("true" n'est pas un booléen, 1 n'est pas un titre).
"""

import uuid
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class _RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

class CreateTaskRequest(_RequestModel):
    title: str = Field(..., examples=["Acheter du lait"])

class DeleteTaskRequest(_RequestModel):
    id: uuid.UUID

class UpdateTaskRequest(_RequestModel):
    id: uuid.UUID
    title: Optional[str] = Field(None, examples=["Aller courir"])
    completed: Optional[bool] = Field(None, examples=[True])

class TaskView(BaseModel):
    id: uuid.UUID
    title: str
    completed: bool
    created_at: Optional[str] = Field(None, examples=["2025-01-01T10:00:00Z"])
