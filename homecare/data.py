# Reference data loaded by seed.bootstrap_if_empty

ORGANS = [
    {"organ_name": "Lungs", "organ_system": "Respiratory", "description": "Airways and lungs"},
    {"organ_name": "Liver", "organ_system": "Digestive", "description": "Liver, stomach and intestines"},
    {"organ_name": "Heart", "organ_system": "Cardiovascular", "description": "Heart and blood vessels"},
    {"organ_name": "Pancreas", "organ_system": "Endocrine", "description": "Hormone-producing glands"},
    {"organ_name": "Blood", "organ_system": "Immune", "description": "Blood and infection response"},
]

DISEASES = [
    {
        "disease_name": "Dengue", "organ_system": "Immune", "severity_level": "high",
        "description": "Mosquito-borne viral infection causing high fever and severe body aches.",
        "symptoms": "High fever, headache, pain behind eyes, joint pain, muscle pain, rash, bleeding",
        "causes": "Dengue virus spread by Aedes mosquitoes",
        "precautions": "Use mosquito repellent, remove standing water, wear long sleeves",
        "transmission": "Bite of infected Aedes mosquito",
        "treatment": "Rest, fluids and paracetamol; hospital care for warning signs",
        "medicines": "Paracetamol",
    },
    {
        "disease_name": "Tuberculosis", "organ_system": "Respiratory", "severity_level": "high",
        "description": "Bacterial infection that mainly attacks the lungs.",
        "symptoms": "Persistent cough, blood in cough, chest pain, night sweats, weight loss, fever",
        "causes": "Mycobacterium tuberculosis",
        "precautions": "BCG vaccination, ventilation, complete the full course of treatment",
        "transmission": "Airborne droplets",
        "treatment": "Six months of combination antibiotics",
        "medicines": "Isoniazid, Rifampicin, Pyrazinamide, Ethambutol",
    },
    {
        "disease_name": "Typhoid", "organ_system": "Digestive", "severity_level": "moderate",
        "description": "Bacterial infection from contaminated food or water.",
        "symptoms": "Prolonged fever, weakness, stomach pain, headache, loss of appetite",
        "causes": "Salmonella Typhi",
        "precautions": "Drink safe water, wash hands, typhoid vaccination",
        "transmission": "Contaminated food and water",
        "treatment": "Antibiotics and fluids",
        "medicines": "Azithromycin, Ceftriaxone",
    },
    {
        "disease_name": "Malaria", "organ_system": "Immune", "severity_level": "high",
        "description": "Parasitic infection causing cycles of fever and chills.",
        "symptoms": "Cyclic fever, chills, sweating, headache, nausea, vomiting, muscle pain",
        "causes": "Plasmodium parasites",
        "precautions": "Bed nets, repellents, prophylaxis when travelling",
        "transmission": "Bite of infected Anopheles mosquito",
        "treatment": "Antimalarial drugs",
        "medicines": "Artemisinin combination therapy, Chloroquine",
    },
    {
        "disease_name": "Diabetes", "organ_system": "Endocrine", "severity_level": "moderate",
        "description": "Chronic condition with high blood sugar.",
        "symptoms": "Increased thirst, frequent urination, weight loss, fatigue, blurred vision, slow healing",
        "causes": "Insufficient insulin or insulin resistance",
        "precautions": "Healthy diet, exercise, regular glucose checks",
        "transmission": None,
        "treatment": "Lifestyle changes, oral drugs or insulin",
        "medicines": "Metformin, Insulin",
    },
    {
        "disease_name": "Hypertension", "organ_system": "Cardiovascular", "severity_level": "moderate",
        "description": "Persistently raised blood pressure.",
        "symptoms": "Headache, dizziness, nosebleed, chest pain",
        "causes": "Genetics, salt intake, obesity, stress",
        "precautions": "Reduce salt, exercise, avoid smoking",
        "transmission": None,
        "treatment": "Lifestyle changes and antihypertensives",
        "medicines": "Amlodipine, Losartan",
    },
    {
        "disease_name": "Hepatitis", "organ_system": "Digestive", "severity_level": "high",
        "description": "Inflammation of the liver, usually viral.",
        "symptoms": "Jaundice, yellow eyes, yellow skin, dark urine, pale stools, fever, fatigue",
        "causes": "Hepatitis viruses, alcohol, toxins",
        "precautions": "Vaccination, safe water, avoid sharing needles",
        "transmission": "Contaminated food or water, blood",
        "treatment": "Supportive care or antivirals",
        "medicines": "Tenofovir, Entecavir",
    },
    {
        "disease_name": "Asthma", "organ_system": "Respiratory", "severity_level": "moderate",
        "description": "Chronic inflammation narrowing the airways.",
        "symptoms": "Wheezing, shortness of breath, chest tightness, coughing at night",
        "causes": "Allergens, pollution, genetics",
        "precautions": "Avoid triggers, keep an inhaler at hand",
        "transmission": None,
        "treatment": "Inhaled bronchodilators and steroids",
        "medicines": "Salbutamol, Budesonide",
    },
    {
        "disease_name": "Pneumonia", "organ_system": "Respiratory", "severity_level": "high",
        "description": "Infection inflaming the air sacs of the lungs.",
        "symptoms": "Fever, cough with phlegm, chest pain, shortness of breath, chills",
        "causes": "Bacteria, viruses or fungi",
        "precautions": "Vaccination, hand hygiene, avoid smoking",
        "transmission": "Respiratory droplets",
        "treatment": "Antibiotics for bacterial cases, oxygen if needed",
        "medicines": "Amoxicillin, Azithromycin",
    },
    {
        "disease_name": "Gastroenteritis", "organ_system": "Digestive", "severity_level": "low",
        "description": "Inflammation of the stomach and intestines.",
        "symptoms": "Diarrhea, vomiting, stomach cramps, nausea, fever, dehydration",
        "causes": "Viruses, bacteria, contaminated food",
        "precautions": "Hand washing, safe food handling",
        "transmission": "Contaminated food and water, contact",
        "treatment": "Oral rehydration and rest",
        "medicines": "ORS, Zinc",
    },
    {
        "disease_name": "Cholera", "organ_system": "Digestive", "severity_level": "high",
        "description": "Acute diarrhoeal infection that can dehydrate quickly.",
        "symptoms": "Severe diarrhea, watery diarrhea, rice water stools, vomiting, dehydration, leg cramps",
        "causes": "Vibrio cholerae",
        "precautions": "Safe water, sanitation, oral cholera vaccine",
        "transmission": "Contaminated water",
        "treatment": "Rapid rehydration, antibiotics in severe cases",
        "medicines": "ORS, Doxycycline",
    },
    {
        "disease_name": "Chikungunya", "organ_system": "Immune", "severity_level": "moderate",
        "description": "Mosquito-borne viral disease with severe joint pain.",
        "symptoms": "High fever, severe joint pain, muscle pain, headache, rash, fatigue",
        "causes": "Chikungunya virus",
        "precautions": "Mosquito control and repellents",
        "transmission": "Bite of infected Aedes mosquito",
        "treatment": "Rest, fluids and pain relief",
        "medicines": "Paracetamol",
    },
    {
        "disease_name": "Common Cold", "organ_system": "Respiratory", "severity_level": "low",
        "description": "Mild viral infection of the nose and throat.",
        "symptoms": "Runny nose, sneezing, sore throat, mild fever, cough, congestion",
        "causes": "Rhinoviruses",
        "precautions": "Hand washing, avoid close contact with sick people",
        "transmission": "Droplets and contaminated surfaces",
        "treatment": "Rest and fluids",
        "medicines": "Paracetamol, saline nasal spray",
    },
]
