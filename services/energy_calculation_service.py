"""Energy calculation service."""

from services.patient_resources import PatientSubResourceService


class EnergyCalculationService(PatientSubResourceService):
    """Energy calculation records of a patient, always listed page by page."""

    array_field = "calculations"
    back_reference = "energyCalculations"
    parent_label = "Energy calculation"
    item_label = "Energy calculation item"
    invalid_item_message = "Invalid calculation id"
    paginate_by_default = True
