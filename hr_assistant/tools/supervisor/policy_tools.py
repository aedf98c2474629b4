# Read-only lookup tools backed by NEA sample data.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Type

from hr_assistant.core.context import ToolContext
from hr_assistant.models.common import ToolResult
from hr_assistant.tools.base_tool import BaseTool

POLICY_DOCUMENTS = {
    "krankmeldung": "Krankmeldungen müssen bis 9:00 Uhr am ersten Krankheitstag gemeldet werden. "
                    "Ein ärztliches Attest ist ab dem dritten Tag erforderlich.",
    "urlaub": "Urlaubsanträge sind mindestens 2 Wochen im Voraus zu stellen. "
              "Der Antrag muss von der direkten Führungskraft genehmigt werden.",
    "arbeitszeit": "Reguläre Arbeitszeiten sind Montag bis Freitag von 8:00 bis 17:00 Uhr. "
                   "Flexible Arbeitszeiten nach Absprache möglich.",
}

EXAMPLE_ACCOUNT = {
    "name": "Julia Schäfer",
    "phone": "(555) 123-4567",
    "position": "Verkäuferin",
    "department": "Einzelhandel",
    "startDate": "2023-01-15",
    "status": "aktiv",
}

STORE_LOCATIONS = [
    {"name": "NEA Hauptfiliale", "address": "Hauptstraße 123, 68159 Mannheim", "distance": "2.3 km"},
    {"name": "NEA Süd", "address": "Südring 45, 68169 Mannheim", "distance": "5.7 km"},
]


class LookupPolicyInput(BaseModel):
    topic: str = Field(..., description="Das Thema oder Schlüsselwort, nach dem in Unternehmensrichtlinien gesucht werden soll (z.B. krankmeldung, urlaub, arbeitszeit).")


class LookupPolicyDocumentTool(BaseTool):
    name: str = "lookupPolicyDocument"
    description: str = "Tool zum Nachschlagen interner Dokumente und Richtlinien nach Thema oder Schlüsselwort."
    args_schema: Type[BaseModel] = LookupPolicyInput

    async def execute(self, context: ToolContext, topic: str) -> ToolResult:
        document = POLICY_DOCUMENTS.get(topic.strip().lower())
        if document:
            return ToolResult.ok(f"Richtlinie für {topic}: {document}")
        return ToolResult.failure(
            f"Keine Richtlinie für das Thema \"{topic}\" gefunden. "
            "Verfügbare Themen: Krankmeldung, Urlaub, Arbeitszeit."
        )


class UserAccountInput(BaseModel):
    phone_number: str = Field(..., description="Formatiert als '(xxx) xxx-xxxx'. MUSS vom Mitarbeiter angegeben werden, niemals ein leerer String.")


class GetUserAccountInfoTool(BaseTool):
    name: str = "getUserAccountInfo"
    description: str = "Tool zum Abrufen von Mitarbeiterinformationen. Dies liest nur Mitarbeiterinformationen und bietet keine Möglichkeit, Werte zu ändern."
    args_schema: Type[BaseModel] = UserAccountInput

    async def execute(self, context: ToolContext, phone_number: str) -> ToolResult:
        if EXAMPLE_ACCOUNT["phone"][-8:] in phone_number:
            return ToolResult.ok(
                f"Mitarbeiter gefunden: {EXAMPLE_ACCOUNT['name']}, Position: {EXAMPLE_ACCOUNT['position']}",
                data=dict(EXAMPLE_ACCOUNT),
            )
        return ToolResult.failure(f"Kein Mitarbeiter mit der Telefonnummer {phone_number} gefunden.")


class NearestStoreInput(BaseModel):
    zip_code: str = Field(..., description="Die 5-stellige Postleitzahl des Mitarbeiters.")


class FindNearestStoreTool(BaseTool):
    name: str = "findNearestStore"
    description: str = "Tool zum Finden des nächstgelegenen Standorts anhand einer Postleitzahl."
    args_schema: Type[BaseModel] = NearestStoreInput

    async def execute(self, context: ToolContext, zip_code: str) -> ToolResult:
        lines = "\n".join(f"{s['name']}: {s['address']} ({s['distance']} entfernt)" for s in STORE_LOCATIONS)
        return ToolResult.ok(
            f"Nächstgelegene Standorte für PLZ {zip_code}:\n{lines}",
            data={"stores": STORE_LOCATIONS},
        )
