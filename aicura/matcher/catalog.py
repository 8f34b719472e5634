"""Static disease/symptom catalog for the local matcher."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from aicura.models import DiseaseInfo, SeverityTier, SymptomCatalogEntry

# One row per observed case: disease name followed by its reported symptoms.
# Symptom names are kept exactly as they appear in the source dataset.
SYMPTOM_ROWS: tuple[tuple[str, ...], ...] = (
    ("Fungal infection", "itching", "skin_rash", "nodal_skin_eruptions", "dischromic _patches"),
    ("Fungal infection", "skin_rash", "nodal_skin_eruptions", "dischromic _patches"),
    ("Allergy", "continuous_sneezing", "shivering", "chills", "watering_from_eyes"),
    ("Allergy", "shivering", "chills", "watering_from_eyes"),
    ("GERD", "stomach_pain", "acidity", "ulcers_on_tongue", "vomiting", "cough", "chest_pain"),
    ("GERD", "acidity", "ulcers_on_tongue", "vomiting", "cough"),
    ("Chronic cholestasis", "itching", "vomiting", "yellowish_skin", "nausea", "loss_of_appetite", "abdominal_pain", "yellowing_of_eyes"),
    ("Chronic cholestasis", "vomiting", "yellowish_skin", "nausea", "abdominal_pain"),
    ("Drug Reaction", "itching", "skin_rash", "stomach_pain", "burning_micturition", "spotting_ urination"),
    ("Drug Reaction", "skin_rash", "stomach_pain", "burning_micturition"),
    ("Peptic ulcer disease", "vomiting", "loss_of_appetite", "abdominal_pain", "passage_of_gases", "internal_itching"),
    ("Peptic ulcer disease", "loss_of_appetite", "abdominal_pain", "passage_of_gases"),
    ("AIDS", "muscle_wasting", "patches_in_throat", "high_fever", "extra_marital_contacts"),
    ("AIDS", "patches_in_throat", "high_fever", "extra_marital_contacts"),
    ("Diabetes", "fatigue", "weight_loss", "restlessness", "lethargy", "irregular_sugar_level", "blurred_and_distorted_vision", "obesity"),
    ("Diabetes", "weight_loss", "restlessness", "lethargy", "irregular_sugar_level"),
    ("Gastroenteritis", "vomiting", "sunken_eyes", "dehydration", "diarrhoea"),
    ("Gastroenteritis", "sunken_eyes", "dehydration", "diarrhoea"),
    ("Bronchial Asthma", "fatigue", "cough", "high_fever", "breathlessness", "family_history", "mucoid_sputum"),
    ("Bronchial Asthma", "cough", "high_fever", "breathlessness", "family_history"),
    ("Hypertension", "headache", "chest_pain", "dizziness", "loss_of_balance", "lack_of_concentration"),
    ("Hypertension", "chest_pain", "dizziness", "loss_of_balance"),
    ("Migraine", "headache", "blurred_and_distorted_vision", "excessive_hunger", "stiff_neck", "depression", "irritability", "visual_disturbances"),
    ("Migraine", "headache", "blurred_and_distorted_vision", "excessive_hunger"),
    ("Cervical spondylosis", "back_pain", "weakness_in_limbs", "neck_pain", "dizziness", "loss_of_balance"),
    ("Cervical spondylosis", "back_pain", "weakness_in_limbs", "neck_pain"),
    ("Paralysis (brain hemorrhage)", "vomiting", "headache", "weakness_of_one_body_side", "alteration_in_speech"),
    ("Paralysis (brain hemorrhage)", "headache", "weakness_of_one_body_side", "alteration_in_speech"),
    ("Jaundice", "itching", "vomiting", "fatigue", "weight_loss", "high_fever", "yellowish_skin", "dark_urine", "abdominal_pain"),
    ("Jaundice", "vomiting", "fatigue", "high_fever", "yellowish_skin"),
    ("Malaria", "chills", "vomiting", "high_fever", "sweating", "headache", "nausea", "muscle_pain"),
    ("Malaria", "chills", "vomiting", "high_fever", "sweating"),
    ("Chicken pox", "itching", "skin_rash", "fatigue", "lethargy", "high_fever", "headache", "loss_of_appetite", "mild_fever", "swelled_lymph_nodes", "malaise", "red_spots_over_body"),
    ("Chicken pox", "skin_rash", "fatigue", "lethargy", "high_fever"),
    ("Dengue", "skin_rash", "chills", "joint_pain", "vomiting", "fatigue", "high_fever", "headache", "nausea", "loss_of_appetite", "pain_behind_the_eyes", "back_pain", "malaise", "muscle_pain", "red_spots_over_body"),
    ("Dengue", "skin_rash", "chills", "joint_pain", "vomiting"),
    ("Typhoid", "chills", "vomiting", "fatigue", "high_fever", "headache", "nausea", "constipation", "abdominal_pain", "diarrhoea", "toxic_look_(typhos)", "belly_pain"),
    ("Typhoid", "chills", "vomiting", "fatigue", "high_fever"),
    ("Hepatitis A", "joint_pain", "vomiting", "yellowish_skin", "dark_urine", "nausea", "loss_of_appetite", "abdominal_pain", "diarrhoea", "mild_fever", "yellowing_of_eyes", "muscle_pain"),
    ("Hepatitis A", "joint_pain", "vomiting", "yellowish_skin", "dark_urine"),
    ("Hepatitis B", "itching", "fatigue", "lethargy", "yellowish_skin", "dark_urine", "loss_of_appetite", "abdominal_pain", "yellow_urine", "yellowing_of_eyes", "malaise", "receiving_blood_transfusion", "receiving_unsterile_injections"),
    ("Hepatitis B", "itching", "fatigue", "lethargy", "yellowish_skin"),
    ("Hepatitis C", "fatigue", "yellowish_skin", "nausea", "loss_of_appetite", "family_history"),
    ("Hepatitis C", "fatigue", "yellowish_skin", "nausea"),
    ("Hepatitis D", "joint_pain", "vomiting", "fatigue", "yellowish_skin", "dark_urine", "nausea", "loss_of_appetite", "abdominal_pain", "yellowing_of_eyes"),
    ("Hepatitis D", "joint_pain", "vomiting", "fatigue", "yellowish_skin"),
    ("Hepatitis E", "joint_pain", "vomiting", "fatigue", "high_fever", "yellowish_skin", "dark_urine", "nausea", "loss_of_appetite", "abdominal_pain", "yellowing_of_eyes", "coma", "stomach_bleeding"),
    ("Hepatitis E", "joint_pain", "vomiting", "fatigue", "high_fever"),
    ("Alcoholic hepatitis", "vomiting", "yellowish_skin", "abdominal_pain", "swelling_of_stomach", "distention_of_abdomen", "history_of_alcohol_consumption", "fluid_overload"),
    ("Alcoholic hepatitis", "vomiting", "yellowish_skin", "abdominal_pain"),
    ("Tuberculosis", "chills", "vomiting", "fatigue", "weight_loss", "cough", "high_fever", "sweating", "loss_of_appetite", "mild_fever", "yellowing_of_eyes", "swelled_lymph_nodes", "malaise", "phlegm", "chest_pain", "blood_in_sputum"),
    ("Tuberculosis", "chills", "vomiting", "fatigue", "weight_loss"),
    ("Common Cold", "continuous_sneezing", "chills", "fatigue", "cough", "high_fever", "headache", "swelled_lymph_nodes", "malaise", "phlegm", "throat_irritation", "redness_of_eyes", "sinus_pressure", "runny_nose", "congestion", "chest_pain", "loss_of_smell", "muscle_pain"),
    ("Common Cold", "continuous_sneezing", "chills", "fatigue", "cough"),
    ("Pneumonia", "chills", "fatigue", "cough", "high_fever", "breathlessness", "sweating", "malaise", "chest_pain", "fast_heart_rate", "rusty_sputum"),
    ("Pneumonia", "chills", "fatigue", "cough", "high_fever"),
    ("Dimorphic hemorrhoids (piles)", "constipation", "pain_during_bowel_movements", "pain_in_anal_region", "bloody_stool", "irritation_in_anal_region"),
    ("Dimorphic hemorrhoids (piles)", "constipation", "pain_during_bowel_movements", "pain_in_anal_region"),
    ("Heart attack", "vomiting", "breathlessness", "sweating", "chest_pain"),
    ("Heart attack", "vomiting", "breathlessness", "sweating"),
    ("Varicose veins", "fatigue", "cramping", "bruising", "obesity", "swollen_legs", "swollen_blood_vessels", "prominent_veins_on_calf"),
    ("Varicose veins", "fatigue", "cramping", "bruising"),
    ("Hypothyroidism", "fatigue", "weight_gain", "cold_hands_and_feets", "mood_swings", "lethargy", "dizziness", "puffy_face_and_eyes", "enlarged_thyroid", "brittle_nails", "swollen_extremeties", "depression", "irritability"),
    ("Hypothyroidism", "fatigue", "weight_gain", "cold_hands_and_feets"),
    ("Hyperthyroidism", "fatigue", "mood_swings", "weight_loss", "restlessness", "sweating", "diarrhoea", "fast_heart_rate", "excessive_hunger"),
    ("Hyperthyroidism", "fatigue", "mood_swings", "weight_loss"),
    ("Hypoglycemia", "vomiting", "fatigue", "anxiety", "sweating", "headache", "nausea", "blurred_and_distorted_vision", "excessive_hunger", "slurred_speech", "irritability", "palpitations"),
    ("Hypoglycemia", "vomiting", "fatigue", "anxiety", "sweating"),
    ("Osteoarthritis", "joint_pain", "neck_pain", "knee_pain", "hip_joint_pain", "swelling_joints", "painful_walking"),
    ("Osteoarthritis", "joint_pain", "neck_pain", "knee_pain"),
    ("Arthritis", "muscle_weakness", "stiff_neck", "swelling_joints", "movement_stiffness"),
    ("Arthritis", "muscle_weakness", "stiff_neck", "swelling_joints"),
    ("(vertigo) Paroxysmal Positional Vertigo", "headache", "nausea", "vomiting", "spinning_movements", "loss_of_balance", "unsteadiness"),
    ("(vertigo) Paroxysmal Positional Vertigo", "headache", "nausea", "vomiting"),
    ("Acne", "skin_rash", "pus_filled_pimples", "blackheads", "scurring"),
    ("Acne", "skin_rash", "pus_filled_pimples", "blackheads"),
    ("Urinary tract infection", "burning_micturition", "bladder_discomfort", "foul_smell_of urine", "continuous_feel_of_urine"),
    ("Urinary tract infection", "burning_micturition", "bladder_discomfort"),
    ("Psoriasis", "skin_rash", "silver_like_dusting", "small_dents_in_nails", "inflammatory_nails"),
    ("Psoriasis", "skin_rash", "silver_like_dusting", "small_dents_in_nails"),
    ("Impetigo", "skin_rash", "high_fever", "blister", "red_sore_around_nose", "yellow_crust_ooze"),
    ("Impetigo", "skin_rash", "high_fever", "blister"),
)

DISEASE_INFO: dict[str, DiseaseInfo] = {
    "Fungal infection": DiseaseInfo(
        description="A fungal infection is an illness caused by fungi that can affect skin, nails, or internal organs.",
        severity=SeverityTier.LOW,
    ),
    "Allergy": DiseaseInfo(
        description="An allergic reaction occurs when the immune system overreacts to a harmless substance.",
        severity=SeverityTier.LOW,
    ),
    "GERD": DiseaseInfo(
        description="Gastroesophageal reflux disease (GERD) is a digestive disorder that affects the lower esophageal sphincter.",
        severity=SeverityTier.MEDIUM,
    ),
    "Chronic cholestasis": DiseaseInfo(
        description="A condition where bile flow from the liver is reduced or stopped, leading to liver damage.",
        severity=SeverityTier.HIGH,
    ),
    "Drug Reaction": DiseaseInfo(
        description="An adverse reaction that occurs when taking medications, ranging from mild rashes to severe complications.",
        severity=SeverityTier.MEDIUM,
    ),
    "Peptic ulcer disease": DiseaseInfo(
        description="Sores that develop on the lining of the stomach, lower esophagus, or small intestine.",
        severity=SeverityTier.MEDIUM,
    ),
    "AIDS": DiseaseInfo(
        description="Acquired immunodeficiency syndrome (AIDS) is a chronic, potentially life-threatening condition caused by HIV.",
        severity=SeverityTier.HIGH,
    ),
    "Diabetes": DiseaseInfo(
        description="A group of metabolic disorders characterized by high blood sugar levels over a prolonged period.",
        severity=SeverityTier.HIGH,
    ),
    "Gastroenteritis": DiseaseInfo(
        description="Inflammation of the stomach and intestines, typically caused by viral or bacterial infection.",
        severity=SeverityTier.MEDIUM,
    ),
    "Bronchial Asthma": DiseaseInfo(
        description="A respiratory condition causing difficulty in breathing due to airway constriction.",
        severity=SeverityTier.MEDIUM,
    ),
    "Hypertension": DiseaseInfo(
        description="A condition where the force of the blood against artery walls is too high.",
        severity=SeverityTier.HIGH,
    ),
    "Migraine": DiseaseInfo(
        description="A neurological condition characterized by intense, throbbing headaches often accompanied by other symptoms.",
        severity=SeverityTier.LOW,
    ),
    "Cervical spondylosis": DiseaseInfo(
        description="A degenerative condition affecting the discs and joints in the neck.",
        severity=SeverityTier.LOW,
    ),
    "Paralysis (brain hemorrhage)": DiseaseInfo(
        description="Loss of muscle function due to bleeding in the brain, often causing stroke-like symptoms.",
        severity=SeverityTier.HIGH,
    ),
    "Jaundice": DiseaseInfo(
        description="Yellowing of the skin and eyes due to high bilirubin levels in the blood.",
        severity=SeverityTier.MEDIUM,
    ),
    "Malaria": DiseaseInfo(
        description="A mosquito-borne infectious disease affecting red blood cells and causing flu-like symptoms.",
        severity=SeverityTier.HIGH,
    ),
    "Chicken pox": DiseaseInfo(
        description="A highly contagious viral infection causing an itchy, blister-like rash all over the body.",
        severity=SeverityTier.LOW,
    ),
    "Dengue": DiseaseInfo(
        description="A mosquito-borne tropical disease causing severe flu-like symptoms and potentially life-threatening complications.",
        severity=SeverityTier.HIGH,
    ),
    "Typhoid": DiseaseInfo(
        description="A bacterial infection that can spread throughout the body, affecting many organs.",
        severity=SeverityTier.HIGH,
    ),
    "Hepatitis A": DiseaseInfo(
        description="A highly contagious liver infection caused by the hepatitis A virus.",
        severity=SeverityTier.MEDIUM,
    ),
    "Hepatitis B": DiseaseInfo(
        description="A serious liver infection caused by the hepatitis B virus that can become chronic.",
        severity=SeverityTier.HIGH,
    ),
    "Hepatitis C": DiseaseInfo(
        description="A viral infection that causes liver inflammation, sometimes leading to serious liver damage.",
        severity=SeverityTier.HIGH,
    ),
    "Hepatitis D": DiseaseInfo(
        description="A serious liver disease caused by the hepatitis D virus, which only occurs in people already infected with hepatitis B.",
        severity=SeverityTier.HIGH,
    ),
    "Hepatitis E": DiseaseInfo(
        description="A liver disease caused by the hepatitis E virus, typically spread through contaminated water.",
        severity=SeverityTier.MEDIUM,
    ),
    "Alcoholic hepatitis": DiseaseInfo(
        description="Liver inflammation caused by drinking alcohol, which can lead to permanent liver damage.",
        severity=SeverityTier.HIGH,
    ),
    "Tuberculosis": DiseaseInfo(
        description="A potentially serious infectious disease that mainly affects the lungs.",
        severity=SeverityTier.HIGH,
    ),
    "Common Cold": DiseaseInfo(
        description="A viral infection of the upper respiratory tract that affects the nose and throat.",
        severity=SeverityTier.LOW,
    ),
    "Pneumonia": DiseaseInfo(
        description="An infection that inflames the air sacs in one or both lungs, which may fill with fluid.",
        severity=SeverityTier.HIGH,
    ),
    "Dimorphic hemorrhoids (piles)": DiseaseInfo(
        description="Swollen and inflamed veins in the rectum and anus causing pain and bleeding.",
        severity=SeverityTier.LOW,
    ),
    "Heart attack": DiseaseInfo(
        description="Occurs when blood flow to part of the heart is blocked, causing damage to the heart muscle.",
        severity=SeverityTier.HIGH,
    ),
    "Varicose veins": DiseaseInfo(
        description="Enlarged, twisted veins that usually appear on the legs and feet.",
        severity=SeverityTier.LOW,
    ),
    "Hypothyroidism": DiseaseInfo(
        description="A condition where the thyroid gland doesn't produce enough hormones.",
        severity=SeverityTier.MEDIUM,
    ),
    "Hyperthyroidism": DiseaseInfo(
        description="A condition where the thyroid gland produces too much of certain hormones.",
        severity=SeverityTier.MEDIUM,
    ),
    "Hypoglycemia": DiseaseInfo(
        description="A condition characterized by an abnormally low level of blood sugar.",
        severity=SeverityTier.MEDIUM,
    ),
    "Osteoarthritis": DiseaseInfo(
        description="A degenerative joint disease that occurs when cartilage in joints breaks down over time.",
        severity=SeverityTier.LOW,
    ),
    "Arthritis": DiseaseInfo(
        description="Inflammation of one or more joints, causing pain and stiffness.",
        severity=SeverityTier.MEDIUM,
    ),
    "(vertigo) Paroxysmal Positional Vertigo": DiseaseInfo(
        description="A disorder that causes brief, repeated episodes of dizziness due to specific head movements.",
        severity=SeverityTier.LOW,
    ),
    "Acne": DiseaseInfo(
        description="A skin condition that occurs when hair follicles become clogged with oil and dead skin cells.",
        severity=SeverityTier.LOW,
    ),
    "Urinary tract infection": DiseaseInfo(
        description="An infection in any part of the urinary system, including kidneys, bladder, and urethra.",
        severity=SeverityTier.MEDIUM,
    ),
    "Psoriasis": DiseaseInfo(
        description="A skin condition that causes red, itchy, scaly patches, most commonly on the knees, elbows, trunk, and scalp.",
        severity=SeverityTier.MEDIUM,
    ),
    "Impetigo": DiseaseInfo(
        description="A highly contagious skin infection that mainly affects infants and children, causing red sores.",
        severity=SeverityTier.LOW,
    ),
}

_UNKNOWN_DISEASE_INFO = DiseaseInfo()


class SymptomCatalog:
    """Immutable, ordered collection of catalog entries.

    Built once and handed to the matcher explicitly; nothing in the matcher
    reaches for a shared instance.
    """

    __slots__ = ("_entries", "_by_name", "_symptom_names")

    def __init__(self, entries: Iterable[SymptomCatalogEntry]) -> None:
        self._entries: tuple[SymptomCatalogEntry, ...] = tuple(entries)
        self._by_name = {entry.disease_name: entry for entry in self._entries}
        names: dict[str, None] = {}
        for entry in self._entries:
            for symptom in entry.known_symptoms:
                names.setdefault(symptom, None)
        self._symptom_names: tuple[str, ...] = tuple(names)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[str]],
        info: Mapping[str, DiseaseInfo] | None = None,
    ) -> SymptomCatalog:
        """Merge (disease, symptom, ...) rows into one entry per disease."""
        info = info or {}
        merged: dict[str, dict[str, None]] = {}
        for row in rows:
            if not row:
                continue
            disease, *symptoms = row
            bucket = merged.setdefault(disease, {})
            for symptom in symptoms:
                bucket.setdefault(symptom, None)

        entries = []
        for disease, symptoms in merged.items():
            details = info.get(disease, _UNKNOWN_DISEASE_INFO)
            entries.append(
                SymptomCatalogEntry(
                    disease_name=disease,
                    known_symptoms=tuple(symptoms),
                    description=details.description,
                    severity=details.severity,
                )
            )
        return cls(entries)

    @property
    def entries(self) -> tuple[SymptomCatalogEntry, ...]:
        return self._entries

    def __iter__(self) -> Iterator[SymptomCatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def all_symptoms(self) -> list[str]:
        """Every distinct catalog symptom name, in first-seen order."""
        return list(self._symptom_names)

    def get_disease_info(self, disease_name: str) -> DiseaseInfo | None:
        entry = self._by_name.get(disease_name)
        if entry is None:
            return None
        return DiseaseInfo(description=entry.description, severity=entry.severity)


def build_default_catalog() -> SymptomCatalog:
    return SymptomCatalog.from_rows(SYMPTOM_ROWS, DISEASE_INFO)
