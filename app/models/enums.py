# app/models/enums.py
"""Status vocabularies stored as plain strings in the database."""

from enum import Enum


class VerificationStatus(str, Enum):
    OK = "OK"
    ANOMALIE = "Anomalie"
    NON_APPLICABLE = "Non applicable"


class VehicleStatus(str, Enum):
    OPERATIONNEL = "Opérationnel"
    EN_MAINTENANCE = "En maintenance"
    HORS_SERVICE = "Hors service"


class MaterialStatus(str, Enum):
    DISPONIBLE = "Disponible"
    EN_REPARATION = "En réparation"
    HORS_SERVICE = "Hors service"


class PersonnelStatus(str, Enum):
    ACTIF = "Actif"
    EN_CONGE = "En congé"
    RETRAITE = "Retraité"
    EN_FORMATION = "En formation"
