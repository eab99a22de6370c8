"""
Static keyword tables and phrase pools.

Keyword triggers are plain substrings, kept exactly as declared, and are
matched against lowercased text. A trigger with capitals ("API", "React")
therefore never matches, and a short trigger can also match inside a
longer word ("cat" in "catch").
"""
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class KeywordTable:
    name: str
    entries: Tuple[Tuple[str, Tuple[str, ...]], ...]
    default: Optional[str] = None
    limit: Optional[int] = None
    # When set, the label itself also counts as a trigger (code context)
    include_label: bool = False
    # Display template for collected labels, e.g. "Framework: {title}"
    display: str = "{label}"

    @classmethod
    def build(cls, name: str, entries: Dict[str, List[str]], default: Optional[str] = None,
              limit: Optional[int] = None, include_label: bool = False,
              display: str = "{label}") -> "KeywordTable":
        frozen = tuple((label, tuple(keywords)) for label, keywords in entries.items())
        return cls(name, frozen, default, limit, include_label, display)

    @classmethod
    def from_words(cls, name: str, words: Iterable[str], limit: Optional[int] = None) -> "KeywordTable":
        """A flat list where every word is its own label."""
        entries: Dict[str, List[str]] = {}
        for word in words:
            entries.setdefault(word, [word])
        return cls.build(name, entries, limit=limit)

    def labels(self) -> List[str]:
        return [label for label, _ in self.entries]

    def triggers(self, label: str) -> Tuple[str, ...]:
        for entry_label, keywords in self.entries:
            if entry_label == label:
                if self.include_label:
                    return keywords + (label,)
                return keywords
        raise KeyError(label)

    def render(self, label: str) -> str:
        return self.display.format(label=label, upper=label.upper(), title=label[:1].upper() + label[1:])


@dataclass(frozen=True)
class PhrasePool:
    name: str
    phrases: Tuple[str, ...]
    # Restrict random selection to the first N phrases
    prefix: Optional[int] = None

    @classmethod
    def of(cls, name: str, phrases: Iterable[str], prefix: Optional[int] = None) -> "PhrasePool":
        return cls(name, tuple(phrases), prefix)

    def candidates(self) -> Tuple[str, ...]:
        if self.prefix:
            return self.phrases[:self.prefix]
        return self.phrases


# ---------------------------------------------------------------------------
# General translation (Jason format)
# ---------------------------------------------------------------------------

STYLE_TABLE = KeywordTable.build("style", {
    "realistic": ["photo", "realistic", "photograph", "lifelike", "real", "actual"],
    "anime": ["anime", "manga", "japanese", "studio ghibli", "akira", "naruto"],
    "fantasy": ["fantasy", "magical", "dragon", "wizard", "elf", "fairy", "mythical"],
    "scifi": ["sci-fi", "futuristic", "cyberpunk", "space", "robot", "alien", "technology"],
    "cartoon": ["cartoon", "disney", "pixar", "animated", "character", "funny"],
    "oil": ["oil painting", "canvas", "brushstrokes", "classical", "renaissance"],
    "watercolor": ["watercolor", "watercolor painting", "soft", "flowing", "transparent"],
    "pixel": ["pixel art", "8-bit", "16-bit", "retro", "pixelated", "minecraft"],
    "abstract": ["abstract", "geometric", "shapes", "patterns", "modern art"],
    "vintage": ["vintage", "retro", "old", "antique", "classic", "1950s", "1960s"],
    "minimal": ["minimal", "simple", "clean", "minimalist", "basic"],
    "detailed": ["detailed", "intricate", "complex", "elaborate", "fine details"],
}, default="realistic")

MOOD_TABLE = KeywordTable.build("mood", {
    "happy": ["happy", "joyful", "cheerful", "smiling", "bright", "sunny"],
    "sad": ["sad", "melancholy", "somber", "gloomy", "depressed", "tears"],
    "epic": ["epic", "dramatic", "heroic", "grand", "massive", "breathtaking"],
    "peaceful": ["peaceful", "calm", "serene", "tranquil", "relaxing"],
    "mysterious": ["mysterious", "foggy", "dark", "hidden", "secret", "enigmatic"],
    "energetic": ["energetic", "dynamic", "action", "movement", "fast", "powerful"],
    "romantic": ["romantic", "love", "heart", "candlelight", "intimate", "passionate"],
    "scary": ["scary", "horror", "creepy", "dark", "fear", "terror"],
}, default="neutral")

CHARACTER_TABLE = KeywordTable.from_words("characters", [
    "person", "man", "woman", "child", "boy", "girl", "baby",
    "wizard", "witch", "dragon", "knight", "princess", "king", "queen",
    "robot", "alien", "cyborg", "monster", "ghost", "vampire",
    "animal", "cat", "dog", "bird", "lion", "tiger", "elephant",
    "fairy", "elf", "dwarf", "orc", "angel", "demon",
], limit=5)

ITEM_TABLE = KeywordTable.from_words("items", [
    "sword", "shield", "armor", "crown", "wand", "staff", "book",
    "car", "airplane", "boat", "ship", "train", "bicycle",
    "house", "castle", "building", "tower", "bridge", "road",
    "tree", "flower", "mountain", "river", "lake", "ocean",
    "computer", "phone", "tablet", "camera", "television", "game",
    "food", "pizza", "cake", "coffee", "wine", "fruit",
], limit=8)

SETTING_TABLE = KeywordTable.from_words("setting", [
    "forest", "city", "beach", "mountain", "desert", "ocean",
    "space", "underwater", "cave", "castle", "house", "garden",
    "street", "office", "school", "hospital", "restaurant", "park",
])

ACTION_TABLE = KeywordTable.from_words("action", [
    "running", "walking", "sitting", "standing", "flying", "swimming",
    "fighting", "dancing", "singing", "reading", "writing", "cooking",
    "sleeping", "playing", "working", "traveling", "exploring", "building",
])

COLOR_TABLE = KeywordTable.from_words("color_palette", [
    "red", "blue", "green", "yellow", "orange", "purple", "pink",
    "black", "white", "gray", "brown", "gold", "silver",
    "cyan", "magenta", "lime", "navy", "teal", "indigo",
], limit=6)

COMPOSITION_TABLE = KeywordTable.from_words("composition", [
    "portrait", "landscape", "close-up", "wide shot", "aerial view",
    "macro", "panorama", "bird's eye view", "low angle", "high angle",
])

LIGHTING_TABLE = KeywordTable.from_words("lighting", [
    "sunlight", "moonlight", "sunrise", "sunset", "dawn", "dusk",
    "neon", "candlelight", "spotlight", "natural", "artificial",
    "bright", "dark", "dim", "glowing", "shadows",
])

GENERAL_TEMPLATES = {
    "portrait": "A detailed portrait of a person with expressive eyes and soft lighting",
    "landscape": "A beautiful landscape with mountains, trees, and dramatic lighting",
    "action": "An action scene with dynamic movement and intense emotions",
    "fantasy": "A magical fantasy scene with mystical creatures and enchanted elements",
    "sci-fi": "A futuristic sci-fi scene with advanced technology and alien worlds",
}

# ---------------------------------------------------------------------------
# Prompt optimization (NanoPrompt)
# ---------------------------------------------------------------------------

PROMPT_STYLE_PHRASES = {
    "realistic": ["photorealistic", "lifelike", "natural lighting", "real-world", "detailed texture"],
    "anime": ["anime style", "manga art", "japanese animation", "studio ghibli style", "cel shading"],
    "fantasy": ["fantasy art", "magical", "enchanted", "mythical", "ethereal", "dreamlike"],
    "scifi": ["sci-fi art", "futuristic", "cyberpunk aesthetic", "high-tech", "advanced technology"],
    "abstract": ["abstract art", "geometric patterns", "modern art", "contemporary", "artistic"],
}

PROMPT_STYLE_TABLE = KeywordTable.build("style", PROMPT_STYLE_PHRASES, default="realistic")

PROMPT_STYLE_POOLS = {
    style: PhrasePool.of(style, phrases) for style, phrases in PROMPT_STYLE_PHRASES.items()
}

QUALITY_POOL = PhrasePool.of("quality", [
    "ultra-detailed", "high-resolution", "photorealistic", "8k", "4k",
    "masterpiece", "best quality", "highest detail", "professional",
    "award-winning", "cinematic quality", "hyperrealistic",
], prefix=3)

COMPOSITION_POOL = PhrasePool.of("composition", [
    "perfect composition", "rule of thirds", "golden ratio", "balanced framing",
    "dynamic perspective", "depth of field", "bokeh effect", "professional photography",
])

LIGHTING_POOL = PhrasePool.of("lighting", [
    "dramatic lighting", "cinematic lighting", "volumetric lighting", "soft shadows",
    "golden hour", "blue hour", "rim lighting", "three-point lighting", "natural light",
])

COLOR_POOL = PhrasePool.of("color", [
    "vibrant colors", "color harmony", "color grading", "professional color palette",
    "rich saturation", "accurate colors", "color correction", "cinematic color grading",
])

DETAIL_POOL = PhrasePool.of("detail", [
    "intricate details", "fine textures", "surface details", "micro details",
    "hyper-detailed", "pixel-perfect", "sharp focus", "crisp details",
])

ERROR_PREVENTION_POOL = PhrasePool.of("error_prevention", [
    "no distortion", "no artifacts", "clean image", "no noise",
    "no blur", "proper anatomy", "correct proportions", "no glitches",
], prefix=2)

# Applied in order; later mappings see the output of earlier ones.
PATTERN_MAPPINGS: Tuple[Tuple[str, str], ...] = (
    # Basic descriptions
    ("a picture of", "high-quality photograph of"),
    ("an image of", "professional photograph of"),
    ("drawing of", "detailed illustration of"),
    ("painting of", "masterpiece painting of"),
    ("photo of", "ultra-realistic photograph of"),
    # Quality
    ("nice", "exceptional"),
    ("good", "outstanding"),
    ("beautiful", "breathtakingly beautiful"),
    ("pretty", "stunningly attractive"),
    ("cool", "impressive"),
    ("amazing", "extraordinary"),
    # Style
    ("simple", "elegant minimalist"),
    ("complex", "intricate detailed"),
    ("modern", "contemporary sophisticated"),
    ("old", "vintage classic"),
    ("new", "cutting-edge"),
    # Lighting
    ("bright", "well-lit with bright illumination"),
    ("dark", "dramatic low-key lighting"),
    ("sunny", "golden hour sunlight"),
    ("night", "cinematic night lighting"),
    # Composition
    ("close up", "detailed close-up shot"),
    ("wide", "expansive wide-angle view"),
    ("top", "bird's eye view"),
    ("side", "profile perspective"),
    # Negatives
    ("without", "excluding"),
    ("no", "absence of"),
    ("avoid", "carefully avoiding"),
    ("don't", "ensuring no"),
)

PROMPT_TEMPLATES = {
    "portrait": "Professional portrait photography, ultra-detailed, perfect composition, dramatic lighting, high resolution, no artifacts",
    "landscape": "Breathtaking landscape photography, wide-angle view, vibrant colors, golden hour lighting, cinematic quality, hyper-detailed",
    "character": "Character design, detailed features, expressive pose, proper anatomy, clean lines, professional quality, no distortion",
    "object": "Product photography, studio lighting, sharp focus, detailed textures, accurate colors, professional composition",
}

# ---------------------------------------------------------------------------
# Technical optimization (NanoCoder)
# ---------------------------------------------------------------------------

DOMAIN_TABLE = KeywordTable.build("domain", {
    "programming": ["code", "algorithm", "function", "class", "method", "variable", "array", "object",
                    "loop", "conditional", "recursion", "data structure", "API", "framework", "library",
                    "dependency"],
    "architecture": ["microservice", "monolith", "serverless", "container", "docker", "kubernetes",
                     "architecture", "design pattern", "scalability", "performance", "security",
                     "reliability"],
    "webdev": ["frontend", "backend", "fullstack", "React", "Vue", "Angular", "Node.js", "Python",
               "JavaScript", "TypeScript", "HTML", "CSS", "database", "REST", "GraphQL", "SPA"],
    "mobile": ["iOS", "Android", "React Native", "Flutter", "Xamarin", "mobile app", "cross-platform",
               "native", "responsive", "touch interface"],
    "devops": ["CI/CD", "pipeline", "deployment", "testing", "monitoring", "logging", "analytics",
               "automation", "infrastructure as code", "terraform"],
    "dataai": ["machine learning", "neural network", "deep learning", "training data", "model", "dataset",
               "feature engineering", "hyperparameters", "inference"],
    "quality": ["unit test", "integration test", "end-to-end test", "debugging", "refactoring",
                "code review", "performance test", "load test", "stress test"],
    "security": ["authentication", "authorization", "encryption", "firewall", "vulnerability", "patch",
                 "compliance", "security audit", "penetration testing"],
    "performance": ["optimization", "caching", "lazy loading", "asynchronous", "concurrency", "threading",
                    "memory management", "garbage collection"],
})

DOMAIN_ENHANCEMENTS = {
    "programming": "well-structured and maintainable",
    "architecture": "scalable and secure architecture",
    "webdev": "responsive and accessible web application",
    "mobile": "cross-platform mobile solution",
    "devops": "automated and reliable deployment",
    "dataai": "efficient and scalable data processing",
    "quality": "comprehensive testing strategy",
    "security": "enterprise-grade security measures",
    "performance": "high-performance optimization",
}

PROGRAMMING_PATTERN_POOL = PhrasePool.of("pattern", ["clean code", "DRY principle", "SOLID principles"])

TECHNICAL_OPTIMIZATION_POOLS = {
    "quality": PhrasePool.of("quality", [
        "clean code", "SOLID principles", "DRY", "KISS", "best practices", "technical debt",
        "readability", "maintainability", "scalability", "extensibility", "modularity",
    ]),
    "performance": PhrasePool.of("performance", [
        "high-performance", "efficient", "optimized", "fast", "low-latency", "high-throughput",
        "responsive", "asynchronous", "parallel processing", "caching strategy",
    ]),
    "architecture": PhrasePool.of("architecture", [
        "well-architected", "distributed", "cloud-native", "event-driven", "microservices",
        "service-oriented", "domain-driven", "clean architecture", "hexagonal",
    ]),
    "security": PhrasePool.of("security", [
        "secure by design", "zero-trust", "encrypted", "authenticated", "authorized",
        "compliant", "auditable", "secure coding", "OWASP standards",
    ]),
}

LANGUAGE_TABLE = KeywordTable.build("languages", {
    "javascript": ["ES6+", "async/await", "promises", "modules", "destructuring", "arrow functions"],
    "typescript": ["strong typing", "interfaces", "generics", "type guards", "decorators"],
    "python": ["dynamic typing", "list comprehensions", "decorators", "generators", "asyncio"],
    "java": ["OOP", "interfaces", "abstract classes", "generics", "concurrency"],
    "rust": ["memory safety", "borrow checker", "zero-cost abstractions", "concurrency"],
    "go": ["concurrent", "interfaces", "goroutines", "channels", "garbage collector"],
}, include_label=True, display="Programming Language: {upper}")

FRAMEWORK_TABLE = KeywordTable.build("frameworks", {
    "react": ["components", "hooks", "state management", "virtual DOM", "React Fiber"],
    "vue": ["progressive framework", "single file components", "composition API", "reactivity"],
    "angular": ["dependency injection", "modules", "decorators", "change detection"],
    "node": ["event-driven", "non-blocking", "NPM", "ECMAScript"],
    "django": ["MVT", "ORM", "admin interface", "template engine"],
    "spring": ["dependency injection", "AOP", "transaction management", "security"],
}, include_label=True, display="Framework: {title}")

TECHNICAL_TEMPLATES = {
    "webapp": "React web application with TypeScript, clean architecture, responsive design, modern UI components, secure authentication",
    "mobileapp": "React Native mobile application, cross-platform solution, native performance, intuitive UI, offline capabilities",
    "microservice": "Node.js microservice with REST API, scalable architecture, Docker containerization, Kubernetes deployment",
    "api": "REST API with Node.js/Express, database integration, authentication middleware, rate limiting, comprehensive documentation",
    "dashboard": "Data visualization dashboard with React, real-time updates, responsive design, interactive charts, data analytics",
}
