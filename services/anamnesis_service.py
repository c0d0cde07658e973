"""Anamnesis service: clinical history entries of a patient."""

from services.patient_resources import PatientSubResourceService


class AnamnesisService(PatientSubResourceService):
    """Anamnesis entries; listing is paginated only when page and pageSize are both given."""

    array_field = "items"
    back_reference = "anamnesis"
    parent_label = "Anamnesis"
    item_label = "Anamnesis item"
    invalid_item_message = "Invalid item id"
