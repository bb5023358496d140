"""Locale-keyed fallback copy. Select one locale's entry with get_templates()."""

DEFAULT_LOCALE = "en"

TEMPLATES: dict[str, dict] = {
    "en": {
        "generic_role": "Professional",
        "deepen_path": {
            "name": "{role} Expert Track",
            "description": "Deepen your expertise and become the go-to specialist in your field.",
            "milestones": [
                ("Senior {role}", 1, "Own complex deliverables end to end and mentor peers."),
                ("Lead {role}", 3, "Set technical direction and quality standards for your area."),
                ("Principal {role}", 5, "Shape strategy across teams as a recognised expert."),
            ],
            "probability": 70,
        },
        "leadership_path": {
            "name": "Leadership Track",
            "description": "Move into people leadership and drive larger initiatives.",
            "milestones": [
                ("Team Lead", 2, "Lead a small team while staying close to the work."),
                ("Manager", 4, "Manage people, delivery and hiring for a function."),
                ("Director", 7, "Own a department's strategy, budget and outcomes."),
            ],
            "probability": 55,
        },
        "gap_time": "3-6 months",
        "gap_resources": [
            ("{skill} fundamentals course", "course"),
            ("Hands-on {skill} project", "project"),
        ],
        "strengths": ["Adaptability", "Problem solving", "Communication"],
        "actions": [
            ("Update your LinkedIn profile", "Add your latest achievements and skills to your profile.", "network"),
            ("Start a {skill} course", "Set aside time this week to learn the basics of {skill}.", "learning"),
            ("Apply to two target roles", "Shortlist two openings that match your next step and apply.", "application"),
        ],
        "insights": {
            "hot_industries": ["Fintech", "Giga-projects", "Healthcare"],
            "saudization_opportunities": [
                "Localization programs for technical roles",
                "HRDF (Hadaf) wage support for Saudi hires",
            ],
            "salary_trends": "Salaries are rising steadily for digital and leadership skills across Saudi Arabia.",
        },
        "market": {
            "trending_roles": ["Data Engineer", "Cloud Architect", "Product Manager"],
            "top_companies": ["Saudi Aramco", "STC", "SABIC"],
            "in_demand_skills": ["Cloud Computing", "Data Analysis", "Project Management"],
            "salary_trends": "Compensation in {industry} is growing moderately, with premiums for scarce skills.",
            "saudization_info": "Nitaqat quotas apply to {industry}; Saudi nationals benefit from HRDF support programs.",
        },
    },
    "ar": {
        "generic_role": "مختص",
        "deepen_path": {
            "name": "مسار الخبرة في {role}",
            "description": "عمّق خبرتك التخصصية لتصبح المرجع الأول في مجالك.",
            "milestones": [
                ("{role} أول", 1, "تولَّ مهام معقدة من البداية للنهاية ووجّه زملاءك."),
                ("{role} قائد", 3, "حدد التوجه الفني ومعايير الجودة في مجالك."),
                ("خبير {role}", 5, "شارك في صياغة الاستراتيجية على مستوى الفرق كخبير معتمد."),
            ],
            "probability": 70,
        },
        "leadership_path": {
            "name": "مسار القيادة",
            "description": "انتقل إلى قيادة الفرق وإدارة المبادرات الكبرى.",
            "milestones": [
                ("قائد فريق", 2, "قُد فريقاً صغيراً مع البقاء قريباً من العمل."),
                ("مدير", 4, "أدِر الأفراد والتسليم والتوظيف لوظيفة كاملة."),
                ("مدير إدارة", 7, "تولَّ استراتيجية الإدارة وميزانيتها ونتائجها."),
            ],
            "probability": 55,
        },
        "gap_time": "3-6 أشهر",
        "gap_resources": [
            ("دورة أساسيات {skill}", "course"),
            ("مشروع تطبيقي في {skill}", "project"),
        ],
        "strengths": ["القدرة على التكيف", "حل المشكلات", "التواصل الفعّال"],
        "actions": [
            ("حدّث ملفك على LinkedIn", "أضف أحدث إنجازاتك ومهاراتك إلى ملفك الشخصي.", "network"),
            ("ابدأ دورة في {skill}", "خصص وقتاً هذا الأسبوع لتعلم أساسيات {skill}.", "learning"),
            ("قدّم على وظيفتين مستهدفتين", "اختر وظيفتين تناسبان خطوتك القادمة وقدّم عليهما.", "application"),
        ],
        "insights": {
            "hot_industries": ["التقنية المالية", "المشاريع الكبرى", "الرعاية الصحية"],
            "saudization_opportunities": [
                "برامج توطين الوظائف التقنية",
                "دعم صندوق تنمية الموارد البشرية (هدف) لتوظيف السعوديين",
            ],
            "salary_trends": "الرواتب في ارتفاع مستمر للمهارات الرقمية والقيادية في المملكة.",
        },
        "market": {
            "trending_roles": ["مهندس بيانات", "معماري حوسبة سحابية", "مدير منتج"],
            "top_companies": ["أرامكو السعودية", "stc", "سابك"],
            "in_demand_skills": ["الحوسبة السحابية", "تحليل البيانات", "إدارة المشاريع"],
            "salary_trends": "الرواتب في قطاع {industry} تنمو بشكل معتدل مع علاوات للمهارات النادرة.",
            "saudization_info": "تنطبق نسب نطاقات على قطاع {industry}، ويستفيد المواطنون من برامج دعم صندوق هدف.",
        },
    },
}


def get_templates(locale: str | None) -> dict:
    """Return the copy for a locale, defaulting to English."""
    return TEMPLATES.get(locale or DEFAULT_LOCALE, TEMPLATES[DEFAULT_LOCALE])
