"""Service catalog. Declaration order is the order pages and the route resolver see."""

from __future__ import annotations

from typing import Dict, List, Optional

from burganhome.catalog.models import Faq, ProcessStep, Service


def _steps(*pairs) -> tuple:
    return tuple(ProcessStep(step=i, title=t, description=d) for i, (t, d) in enumerate(pairs, start=1))


def _faqs(*pairs) -> tuple:
    return tuple(Faq(question=q, answer=a) for q, a in pairs)


_SERVICES = [
    Service(
        id="bathroom-remodeling",
        slug="bathroom-remodeling",
        title="Professional Bathroom Remodeling Services",
        short_title="Bathroom Remodeling",
        description=(
            "Transform your bathroom into a luxurious retreat with our comprehensive remodeling services. "
            "From modern updates to complete renovations, we handle every aspect of your bathroom transformation."
        ),
        meta_description="Expert bathroom remodeling in Spokane, WA. Custom designs, quality materials, and professional installation. Get your free quote today!",
        hero_image="/images/services/bathroom-remodeling-hero.jpg",
        icon="Bath",
        price_range="$$$",
        duration="2-4 weeks",
        benefits=(
            "Increase home value by up to 70% of renovation cost",
            "Improve energy efficiency with modern fixtures",
            "Create a spa-like retreat in your home",
            "Enhance safety with accessibility features",
            "Maximize space with smart storage solutions",
            "Reduce water usage with eco-friendly fixtures",
        ),
        process=_steps(
            ("Free Consultation", "Meet with our design team to discuss your vision, needs, and budget"),
            ("Design & Planning", "Create detailed 3D designs and select materials, fixtures, and finishes"),
            ("Preparation", "Obtain permits, order materials, and prepare the workspace"),
            ("Demolition", "Carefully remove old fixtures and prepare for new installation"),
            ("Installation", "Install plumbing, electrical, tiles, fixtures, and finishing touches"),
            ("Final Inspection", "Complete walkthrough and ensure everything meets your expectations"),
        ),
        faqs=_faqs(
            (
                "How much does a bathroom remodel cost in Spokane?",
                "Bathroom remodeling costs in Spokane typically range from $5,000 for basic updates to $25,000+ for luxury renovations. "
                "The final cost depends on size, materials, and scope of work.",
            ),
            (
                "How long does a bathroom remodel take?",
                "Most bathroom remodels take 2-4 weeks, depending on the scope. Simple updates might take 1-2 weeks, "
                "while complete renovations can take 4-6 weeks.",
            ),
            (
                "Do I need permits for bathroom remodeling?",
                "Yes, permits are typically required for plumbing, electrical, and structural changes. "
                "We handle all permit applications and ensure code compliance.",
            ),
        ),
        related_services=("kitchen-remodeling", "interior-painting", "handyman-services"),
        keywords=("bathroom remodel", "bathroom renovation", "shower installation", "bathtub replacement", "vanity installation", "tile work"),
        local_keywords=("Spokane bathroom contractor", "bathroom remodeling near me", "local bathroom renovation"),
        common_issues=("Water damage", "Outdated fixtures", "Poor ventilation", "Limited storage", "Accessibility concerns"),
        seasonal_considerations=(
            "Best done in spring/summer when ventilation is easier",
            "Winter projects may take longer due to drying times",
        ),
    ),
    Service(
        id="kitchen-remodeling",
        slug="kitchen-remodeling",
        title="Expert Kitchen Remodeling & Renovation Services",
        short_title="Kitchen Remodeling",
        description=(
            "Create your dream kitchen with our comprehensive remodeling services. "
            "From cabinet refacing to complete renovations, we bring your culinary space to life."
        ),
        meta_description="Professional kitchen remodeling in Spokane, WA. Custom cabinets, countertops, and modern designs. Transform your kitchen today!",
        hero_image="/images/services/kitchen-remodeling-hero.jpg",
        icon="Kitchen",
        price_range="$$$$",
        duration="4-8 weeks",
        benefits=(
            "Increase home value by up to 80% of renovation cost",
            "Improve functionality with modern layouts",
            "Reduce energy costs with efficient appliances",
            "Create the perfect entertaining space",
            "Maximize storage with custom solutions",
            "Enhance safety with updated electrical and plumbing",
        ),
        process=_steps(
            ("Initial Consultation", "Discuss your vision, cooking habits, and budget requirements"),
            ("Design Development", "Create layout plans, 3D renderings, and material selections"),
            ("Product Selection", "Choose cabinets, countertops, appliances, and fixtures"),
            ("Demolition & Prep", "Remove old cabinets and counters and prepare utilities"),
            ("Construction", "Install cabinets, countertops, plumbing, electrical, and appliances"),
            ("Final Details", "Add backsplash, hardware, and trim, then walk through the finished kitchen"),
        ),
        faqs=_faqs(
            (
                "What is the average cost of kitchen remodeling in Spokane?",
                "Kitchen remodeling in Spokane ranges from $15,000 for minor updates to $75,000+ for luxury renovations. "
                "Most homeowners spend $25,000-$45,000 for a full remodel.",
            ),
            (
                "How long does a kitchen remodel take?",
                "A typical kitchen remodel takes 4-8 weeks. Minor updates might take 2-3 weeks, "
                "while major renovations can take 10-12 weeks.",
            ),
            (
                "Should I remodel or just reface my cabinets?",
                "Refacing costs 30-50% less than replacement and works well for solid cabinets. "
                "Full replacement is better for layout changes or damaged cabinets.",
            ),
        ),
        related_services=("bathroom-remodeling", "interior-painting", "handyman-services"),
        keywords=("kitchen remodel", "kitchen renovation", "cabinet installation", "countertop replacement", "kitchen design", "backsplash installation"),
        local_keywords=("Spokane kitchen contractor", "kitchen remodeling near me", "local kitchen renovation"),
        common_issues=("Outdated layout", "Insufficient storage", "Poor lighting", "Old appliances", "Damaged countertops"),
        seasonal_considerations=(
            "Year-round service",
            "Holiday season may affect timeline",
            "Spring/summer ideal for open-window ventilation",
        ),
    ),
    Service(
        id="interior-painting",
        slug="interior-painting",
        title="Professional Interior Painting Services",
        short_title="Interior Painting",
        description=(
            "Transform your home with our expert interior painting services. "
            "From single rooms to entire homes, we deliver flawless finishes that last."
        ),
        meta_description="Interior painting services in Spokane, WA. Professional painters, quality paints, and perfect finishes. Free estimates available!",
        hero_image="/images/services/interior-painting-hero.jpg",
        icon="Paint",
        price_range="$$",
        duration="1-5 days",
        benefits=(
            "Instantly refresh and modernize any space",
            "Increase home value with professional finishes",
            "Protect walls from moisture and wear",
            "Improve indoor air quality with low-VOC paints",
            "Create custom moods with color psychology",
            "Cover imperfections and repair minor damage",
        ),
        process=_steps(
            ("Color Consultation", "Pick colors and finishes that suit the room and its light"),
            ("Preparation", "Move and cover furniture, patch holes, and tape edges"),
            ("Painting", "Apply primer where needed and two coats of premium paint"),
            ("Detail Work", "Cut in clean lines at ceilings, trim, and fixtures"),
            ("Cleanup", "Remove tape and coverings and put the room back in order"),
            ("Inspection", "Walk through every room with you and touch up anything missed"),
        ),
        faqs=_faqs(
            (
                "How much does interior painting cost in Spokane?",
                "Interior painting in Spokane typically costs $2-4 per square foot or $200-800 per room, "
                "depending on wall condition, paint quality, and ceiling height.",
            ),
            (
                "How long does interior painting take?",
                "A single room takes 1-2 days. A whole house (2,500 sq ft) typically takes 3-5 days with a professional crew.",
            ),
            (
                "What paint brands do you use?",
                "We use premium brands like Sherwin-Williams, Benjamin Moore, and Behr, choosing the best paint for each specific application.",
            ),
        ),
        related_services=("exterior-painting", "trim-painting", "handyman-services"),
        keywords=("interior painting", "house painting", "wall painting", "ceiling painting", "paint contractor", "room painting"),
        local_keywords=("Spokane interior painter", "house painting near me", "local painting contractor"),
        common_issues=("Fading paint", "Wall damage", "Outdated colors", "Peeling paint", "Water stains"),
        seasonal_considerations=(
            "Year-round service",
            "Winter requires longer drying times",
            "Spring/fall ideal for open-window ventilation",
        ),
    ),
    Service(
        id="exterior-painting",
        slug="exterior-painting",
        title="Professional Exterior Painting Services",
        short_title="Exterior Painting",
        description=(
            "Protect and beautify your home with our expert exterior painting services. "
            "Weather-resistant finishes that enhance curb appeal and protect your investment."
        ),
        meta_description="Exterior painting services in Spokane, WA. Weather-resistant paints, expert preparation, and lasting protection. Get your free quote!",
        hero_image="/images/services/exterior-painting-hero.jpg",
        icon="Home",
        price_range="$$$",
        duration="3-7 days",
        benefits=(
            "Boost curb appeal and home value instantly",
            "Protect siding from weather and UV damage",
            "Prevent wood rot and moisture damage",
            "Seal gaps to improve energy efficiency",
            "Extend the life of your siding",
            "Create a fresh, updated appearance",
        ),
        process=_steps(
            ("Inspection & Quote", "Inspect siding and trim and give a written quote"),
            ("Power Washing", "Remove dirt, mildew, and chalking for good adhesion"),
            ("Preparation", "Scrape, sand, caulk, and prime bare or damaged areas"),
            ("Painting", "Apply weather-rated coatings in the right conditions"),
            ("Trim Work", "Finish fascia, doors, and window trim with crisp lines"),
            ("Final Inspection", "Walk the property with you and clean up the site"),
        ),
        faqs=_faqs(
            (
                "How much does exterior painting cost in Spokane?",
                "Exterior painting in Spokane typically costs $3,000-8,000 for an average home. "
                "Price depends on size, stories, condition, and paint quality.",
            ),
            (
                "When is the best time for exterior painting in Spokane?",
                "Late spring through early fall (May-September) is ideal when temperatures are above 50°F and humidity is low.",
            ),
            (
                "Do you paint in rain or cold weather?",
                "We don't paint in rain or when temperatures are below 50°F. We monitor weather closely and schedule accordingly.",
            ),
        ),
        related_services=("interior-painting", "trim-painting", "home-repairs"),
        keywords=("exterior painting", "house painting", "siding painting", "exterior paint", "home painting", "outdoor painting"),
        local_keywords=("Spokane exterior painter", "house painting near me", "local exterior painting"),
        common_issues=("Peeling paint", "Wood rot", "Fading color", "Mildew growth", "Caulk failure"),
        seasonal_considerations=(
            "Best in late spring to early fall",
            "Avoid winter months",
            "Schedule around Spokane's rainy season",
        ),
    ),
    Service(
        id="handyman-services",
        slug="handyman-services",
        title="Reliable Handyman Services",
        short_title="Handyman Services",
        description=(
            "Your one-stop solution for all home maintenance and repair needs. "
            "From quick fixes to complex projects, our skilled handymen handle it all."
        ),
        meta_description="Professional handyman services in Spokane, WA. Home repairs, maintenance, and improvements. Same-day service available!",
        hero_image="/images/services/handyman-hero.jpg",
        icon="Tool",
        price_range="$",
        duration="1-4 hours typically",
        benefits=(
            "One call for multiple repair needs",
            "Save time with professional efficiency",
            "Prevent small issues from becoming costly repairs",
            "Maintain home value with regular upkeep",
            "Expert solutions for tricky problems",
            "Guaranteed workmanship on all repairs",
        ),
        process=_steps(
            ("Service Request", "Tell us what needs fixing by phone or online"),
            ("Assessment", "We review the list and give you a clear estimate"),
            ("Scheduling", "Pick a time that works, including same-day slots"),
            ("Repair Work", "A skilled handyman completes every item on the list"),
            ("Quality Check", "We test the work and clean up before leaving"),
            ("Follow-up", "We check in to make sure everything is holding up"),
        ),
        faqs=_faqs(
            (
                "What is your handyman hourly rate in Spokane?",
                "Our handyman services are $75-125 per hour depending on the complexity of work. "
                "We also offer flat-rate pricing for common repairs.",
            ),
            (
                "Do you have a minimum service charge?",
                "Yes, we have a 2-hour minimum for handyman services to ensure we can provide quality work and cover travel time.",
            ),
            (
                "Are your handymen licensed and insured?",
                "Yes, all our handymen are licensed, insured, and background-checked for your peace of mind.",
            ),
        ),
        related_services=("home-repairs", "interior-painting", "trim-painting"),
        keywords=("handyman", "home repairs", "property maintenance", "fix-it services", "home improvement", "general repairs"),
        local_keywords=("Spokane handyman", "handyman near me", "local handyman services"),
        common_issues=("Leaky faucets", "Squeaky doors", "Drywall holes", "Broken fixtures", "Stuck windows"),
        seasonal_considerations=("Year-round service", "Winter prep services", "Spring maintenance packages"),
    ),
    Service(
        id="home-repairs",
        slug="home-repairs",
        title="Comprehensive Home Repair Services",
        short_title="Home Repairs",
        description=(
            "Expert repair services for every part of your home. "
            "From emergency fixes to preventive maintenance, we keep your home in perfect condition."
        ),
        meta_description="Home repair services in Spokane, WA. Drywall, plumbing, electrical, and more. Fast, reliable repairs by licensed professionals.",
        hero_image="/images/services/home-repairs-hero.jpg",
        icon="Wrench",
        price_range="$$",
        duration="Varies by repair",
        benefits=(
            "Prevent costly damage with timely repairs",
            "Restore safety and functionality",
            "Maintain property value",
            "Extend the life of home systems",
            "Peace of mind with warranty coverage",
            "24/7 emergency repair availability",
        ),
        process=_steps(
            ("Damage Assessment", "Find the cause of the problem, not just the symptom"),
            ("Repair Plan", "Explain the options and agree on scope and price"),
            ("Parts & Materials", "Source matching parts and quality materials"),
            ("Repair Execution", "Fix the problem to code"),
            ("Testing", "Verify the repair works under normal use"),
            ("Warranty", "Back the work with our 1-year labor warranty"),
        ),
        faqs=_faqs(
            (
                "Do you offer emergency home repair services?",
                "Yes, we offer 24/7 emergency repairs for urgent issues like water leaks, electrical problems, and storm damage.",
            ),
            (
                "How quickly can you respond to repair requests?",
                "Emergency repairs within 2-4 hours. Standard repairs typically scheduled within 24-48 hours.",
            ),
            (
                "Do you warranty your repair work?",
                "Yes, we provide a 1-year warranty on labor and pass through all manufacturer warranties on parts.",
            ),
        ),
        related_services=("handyman-services", "interior-painting", "exterior-painting"),
        keywords=("home repair", "house repair", "property repair", "damage repair", "emergency repair", "maintenance"),
        local_keywords=("Spokane home repair", "emergency repair near me", "local repair services"),
        common_issues=("Water damage", "Storm damage", "Foundation issues", "Roof leaks", "Electrical problems"),
        seasonal_considerations=("Winter freeze damage", "Spring storm repairs", "Fall maintenance prep"),
    ),
    Service(
        id="trim-painting",
        slug="trim-painting",
        title="Professional Trim & Molding Painting",
        short_title="Trim Painting",
        description=(
            "Precision trim painting that adds the perfect finishing touch to your home. "
            "Expert detail work on baseboards, crown molding, doors, and window frames."
        ),
        meta_description="Trim painting services in Spokane, WA. Baseboards, crown molding, doors, and windows. Precision work with perfect lines!",
        hero_image="/images/services/trim-painting-hero.jpg",
        icon="Frame",
        price_range="$",
        duration="1-3 days",
        benefits=(
            "Create striking contrast and definition",
            "Highlight architectural features",
            "Refresh rooms without full repainting",
            "Protect wood trim from moisture damage",
            "Increase home value with attention to detail",
        ),
        process=_steps(
            ("Consultation", "Choose sheen and color for baseboards, doors, and molding"),
            ("Preparation", "Fill nail holes, caulk gaps, and sand for adhesion"),
            ("Painting", "Brush and spray durable enamel with clean lines"),
            ("Inspection", "Check every edge and touch up before we leave"),
        ),
        faqs=_faqs(
            (
                "Can you paint trim without painting the walls?",
                "Yes. Trim-only projects are common and we protect the walls with careful taping.",
            ),
        ),
        related_services=("interior-painting", "exterior-painting", "handyman-services"),
        keywords=("trim painting", "baseboard painting", "crown molding", "door painting", "window trim", "molding painting"),
        local_keywords=("Spokane trim painter", "trim painting near me", "local detail painting"),
        common_issues=("Chipped paint", "Nail holes", "Gaps and cracks", "Yellowing trim", "Pet damage"),
        seasonal_considerations=("Year-round service", "Ideal during interior painting projects", "Quick refresh before holidays"),
    ),
]

SERVICES: Dict[str, Service] = {s.id: s for s in _SERVICES}

# Pre-generated landing pages cover these services first.
PRIORITY_SERVICES = (
    "bathroom-remodeling",
    "kitchen-remodeling",
    "interior-painting",
    "exterior-painting",
    "handyman-services",
)


def get_service_by_slug(slug: str) -> Optional[Service]:
    for service in SERVICES.values():
        if service.slug == slug:
            return service
    return None


def get_all_services() -> List[Service]:
    return list(SERVICES.values())


def get_related_services(service_id: str) -> List[Service]:
    service = SERVICES.get(service_id)
    if not service:
        return []
    return [SERVICES[i] for i in service.related_services if i in SERVICES]
