from decimal import Decimal

from django.conf import settings
from django.db.models.signals import post_migrate
from django.dispatch import receiver


DEMO_CAMPAIGNS = [
    {
        "slug": "solarflow",
        "company_name": "SolarFlow",
        "tagline": "Making solar energy accessible for every home",
        "description": (
            "SolarFlow is revolutionizing residential solar installation with our AI-powered assessment "
            "tool and flexible financing options. We help homeowners go solar in days, not months."
        ),
        "logo_url": "/campaigns/solarflow-logo.png",
        "cover_image_url": "/campaigns/solarflow-cover.jpg",
        "founder_name": "Maria Chen",
        "founder_bio": "Former Tesla Energy engineer with 10+ years in renewable energy. Built and sold two cleantech startups.",
        "problem": "Going solar is confusing, expensive, and takes too long. Most homeowners give up before they even get a quote.",
        "solution": (
            "Our AI instantly analyzes your roof from satellite imagery, provides accurate quotes, and connects "
            "you with vetted installers. Average time from signup to installation: 14 days."
        ),
        "traction": "2,500+ installations completed, $4.2M ARR, 40% month-over-month growth",
        "min_investment": Decimal("50"),
        "max_investment_per_person": Decimal("1000"),
        "target_amount": Decimal("150000"),
        "amount_raised": Decimal("87500"),
        "crowd_percentage": Decimal("7"),
        "status": "live",
    },
    {
        "slug": "mindfulmeals",
        "company_name": "MindfulMeals",
        "tagline": "Personalized nutrition powered by your DNA",
        "description": (
            "MindfulMeals creates custom meal plans based on your genetic profile, health goals, and taste "
            "preferences. Eat smarter, not harder."
        ),
        "logo_url": "/campaigns/mindfulmeals-logo.png",
        "cover_image_url": "/campaigns/mindfulmeals-cover.jpg",
        "founder_name": "Dr. James Park",
        "founder_bio": "Stanford MD/PhD in nutritional genomics. Previously led research at 23andMe.",
        "problem": "Generic diet advice doesn't work because everyone's body is different. 95% of diets fail within a year.",
        "solution": (
            "We combine genetic testing with AI to create truly personalized nutrition plans. Our users see 3x "
            "better results than traditional diets."
        ),
        "traction": "15,000 active subscribers, 92% retention rate, featured in Forbes and TechCrunch",
        "min_investment": Decimal("50"),
        "max_investment_per_person": Decimal("1000"),
        "target_amount": Decimal("200000"),
        "amount_raised": Decimal("45000"),
        "crowd_percentage": Decimal("5"),
        "status": "live",
    },
    {
        "slug": "petpal",
        "company_name": "PetPal",
        "tagline": "The smart collar that keeps your pet healthy",
        "description": (
            "PetPal is a health-monitoring smart collar for dogs and cats. Track activity, detect early signs "
            "of illness, and get personalized care recommendations."
        ),
        "logo_url": "/campaigns/petpal-logo.png",
        "cover_image_url": "/campaigns/petpal-cover.jpg",
        "founder_name": "Sarah & Tom Williams",
        "founder_bio": (
            "Husband-wife team. Sarah: former Apple hardware engineer. Tom: veterinarian with 15 years experience."
        ),
        "problem": "Pet owners often don't notice health issues until it's too late. Vet visits are expensive and stressful.",
        "solution": (
            "Our collar monitors vital signs 24/7 and alerts you to potential health issues before they become "
            "serious. Integrates with your vet for seamless care."
        ),
        "traction": "8,000 collars sold, $1.8M in revenue, partnerships with 200+ vet clinics",
        "min_investment": Decimal("100"),
        "max_investment_per_person": Decimal("2500"),
        "target_amount": Decimal("250000"),
        "amount_raised": Decimal("0"),
        "crowd_percentage": Decimal("10"),
        "status": "draft",
    },
]


@receiver(post_migrate)
def create_demo_campaigns(sender, **kwargs):
    if sender.name != "investment" or not settings.SEED_DEMO_CAMPAIGNS:
        return

    from .models import Campaign

    for data in DEMO_CAMPAIGNS:
        defaults = {k: v for k, v in data.items() if k != "slug"}
        Campaign.objects.get_or_create(slug=data["slug"], defaults=defaults)
