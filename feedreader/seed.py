"""Bundled articles shown when neither live nor cached data is available."""

from __future__ import annotations

from typing import Tuple

from .models import Article

SEED_ARTICLES: Tuple[Article, ...] = (
    Article(
        id="1",
        title="Revolutionary AI System Achieves Breakthrough in Climate Modeling",
        summary=(
            "New machine learning algorithms provide unprecedented accuracy in predicting "
            "climate patterns, offering hope for better environmental planning."
        ),
        content=(
            "Scientists at leading research institutions have developed an artificial "
            "intelligence system that represents a major breakthrough in climate modeling. "
            "The new system combines advanced machine learning algorithms with massive "
            "datasets to predict climate patterns with unprecedented accuracy. This "
            "development could revolutionize how we approach environmental planning and "
            "climate change mitigation strategies. The AI system processes satellite data, "
            "ocean temperature readings, and atmospheric measurements to generate "
            "predictions that are 40% more accurate than previous models."
        ),
        author="Dr. Sarah Chen",
        published_at="2024-01-15T10:30:00Z",
        image_url="https://images.unsplash.com/photo-1611273426858-450d8e3c9fce?w=800",
        category="Technology",
        read_time=4,
    ),
    Article(
        id="2",
        title="Global Markets Rally as Economic Indicators Show Strong Recovery",
        summary=(
            "Major stock exchanges worldwide post significant gains following positive "
            "employment data and corporate earnings reports."
        ),
        content=(
            "Financial markets around the world experienced a strong rally today as multiple "
            "economic indicators pointed to robust recovery. The Dow Jones Industrial Average "
            "gained 2.3%, while the S&P 500 rose 2.1%. European markets also saw substantial "
            "gains, with the FTSE 100 up 1.8% and the DAX increasing by 2.4%. The positive "
            "sentiment was driven by better-than-expected employment figures, strong "
            "corporate earnings, and optimistic forward guidance from major companies."
        ),
        author="Michael Rodriguez",
        published_at="2024-01-15T08:45:00Z",
        image_url="https://images.unsplash.com/photo-1611974789855-9c2a0a7236a3?w=800",
        category="Business",
        read_time=3,
    ),
    Article(
        id="3",
        title="Championship Game Ends in Stunning Overtime Victory",
        summary=(
            "Underdog team secures championship title in thrilling overtime finish that had "
            "fans on their feet."
        ),
        content=(
            "In one of the most memorable championship games in recent history, the underdog "
            "Wildcats defeated the heavily favored Eagles 28-21 in overtime. The game featured "
            "incredible individual performances, including a 300-yard passing performance by "
            "Wildcats quarterback Jake Morrison. The victory caps off a remarkable season for "
            "the Wildcats, who started the year with little expectations but rallied together "
            "to achieve the ultimate prize."
        ),
        author="Emma Thompson",
        published_at="2024-01-14T22:15:00Z",
        image_url="https://images.unsplash.com/photo-1560272564-c83b66b1ad12?w=800",
        category="Sports",
        read_time=5,
    ),
    Article(
        id="4",
        title="New Archaeological Discovery Rewrites Ancient History",
        summary=(
            "Excavation team uncovers 3,000-year-old artifacts that challenge existing "
            "theories about early civilizations."
        ),
        content=(
            "A team of archaeologists working in the Mediterranean has made a discovery that "
            "could fundamentally change our understanding of ancient civilizations. The "
            "excavation revealed a complex of buildings and artifacts dating back 3,000 years, "
            "including advanced metalworking tools and sophisticated artwork. The findings "
            "suggest that early civilizations were more interconnected and technologically "
            "advanced than previously believed."
        ),
        author="Prof. David Martinez",
        published_at="2024-01-14T16:20:00Z",
        image_url="https://images.unsplash.com/photo-1594736797933-d0401ba2fe65?w=800",
        category="Science",
        read_time=6,
    ),
    Article(
        id="5",
        title="Renewable Energy Initiative Launched in 50 Cities Worldwide",
        summary=(
            "Ambitious project aims to transition urban areas to 100% clean energy by 2030 "
            "through innovative solar and wind solutions."
        ),
        content=(
            "A groundbreaking renewable energy initiative has been launched simultaneously in "
            "50 major cities across six continents. The project, backed by international "
            "funding and technological partnerships, aims to achieve 100% clean energy in "
            "participating urban areas by 2030. The initiative includes innovative solar panel "
            "installations on public buildings, urban wind farms, and advanced battery storage "
            "systems."
        ),
        author="Lisa Wang",
        published_at="2024-01-14T14:10:00Z",
        image_url="https://images.unsplash.com/photo-1509391366360-2e959784a276?w=800",
        category="Environment",
        read_time=4,
    ),
    Article(
        id="6",
        title="Medical Breakthrough: New Treatment Shows Promise for Rare Disease",
        summary=(
            "Clinical trials reveal 85% success rate for experimental therapy targeting "
            "previously incurable genetic condition."
        ),
        content=(
            "Medical researchers have announced promising results from clinical trials of an "
            "experimental treatment for a rare genetic disease that affects thousands "
            "worldwide. The gene therapy approach showed an 85% success rate in early trials, "
            "offering hope to patients who previously had no treatment options. The therapy "
            "works by correcting defective genes at the cellular level."
        ),
        author="Dr. Amanda Foster",
        published_at="2024-01-14T12:30:00Z",
        image_url="https://images.unsplash.com/photo-1559757148-5c350d0d3c56?w=800",
        category="Health",
        read_time=5,
    ),
    Article(
        id="7",
        title="Space Mission Captures Stunning Images of Distant Galaxy",
        summary=(
            "Latest space telescope data reveals intricate details of galaxy formation "
            "billions of light-years away."
        ),
        content=(
            "The latest images from our most advanced space telescope have captured "
            "breathtaking details of a galaxy located 8 billion light-years from Earth. These "
            "observations provide unprecedented insights into how galaxies formed in the early "
            "universe. The images show complex star formation patterns and reveal the presence "
            "of supermassive black holes that influenced galactic evolution."
        ),
        author="Dr. James Peterson",
        published_at="2024-01-14T09:45:00Z",
        image_url="https://images.unsplash.com/photo-1446776876896-3e62c5e3d1f0?w=800",
        category="Science",
        read_time=4,
    ),
    Article(
        id="8",
        title="Tech Giant Announces Major Investment in Quantum Computing",
        summary=(
            "Multi-billion dollar commitment aims to accelerate quantum research and bring "
            "practical applications to market."
        ),
        content=(
            "A leading technology company has announced a $5 billion investment in quantum "
            "computing research and development over the next five years. The initiative will "
            "fund new research facilities, hire hundreds of quantum physicists and engineers, "
            "and accelerate the development of practical quantum applications in fields "
            "ranging from cryptography to drug discovery."
        ),
        author="Alex Kim",
        published_at="2024-01-13T15:20:00Z",
        image_url="https://images.unsplash.com/photo-1635070041078-e363dbe005cb?w=800",
        category="Technology",
        read_time=3,
    ),
)


__all__ = ["SEED_ARTICLES"]
