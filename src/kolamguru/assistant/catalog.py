"""Pre-authored response catalog.

Hides what the assistant says. Each pattern tier and each non-duration
intent maps to one ResponseTemplate; the synthesizer only decides which
entry to use and fills the {minutes} and {name} slots.
"""

from dataclasses import dataclass

from .models import Category, Intent, PatternTier


@dataclass(frozen=True)
class ResponseTemplate:
    """A fixed reply with slots for the time budget and display name."""

    body: str
    category: Category
    suggestions: tuple[str, ...]

    def render(self, minutes: int | None = None, name: str = "") -> str:
        """Fill the template slots."""
        return self.body.format(minutes=minutes if minutes is not None else "", name=name)


@dataclass(frozen=True)
class LearningPath:
    """A one-click prompt offered next to the conversation."""

    label: str
    description: str
    prompt: str


COMPOSING_TEXT = "Analyzing with cultural wisdom..."


WELCOME = ResponseTemplate(
    body="""🙏 Namaste, {name}! I'm your Kolam Guru, a cultural guide bridging 5,000 years of sacred tradition with modern learning.

### ✨ What I can help with
- **Time-based pattern recommendations:** tell me how much time you have and I'll suggest a Kolam that fits
- **Cultural wisdom:** origins, regional variations, spiritual meaning and stories from Tamil tradition
- **Step-by-step guidance:** clear, encouraging instructions for your skill level
- **Technique mastery:** hand positions, materials and the meditative side of the practice
- **Supportive learning:** encouragement for mistakes, daily routines and confidence building

### 🕐 How to get started
Simply tell me your available time, for example:
- "I have 15 minutes" → quick 3×3 pulli pattern with simple steps
- "I have 1 hour" → 5×5 flower Kolam with cultural meaning
- "I have 2 hours" → advanced 7×7 sikku pattern
- "I have all day" → festival masterpiece with traditional ceremonies

**🌸 Remember:** Kolam is about joy, mindfulness and connection, not perfection. What calls to your heart today? ✨""",
    category=Category.GENERAL,
    suggestions=(
        "I have 30 minutes",
        "Show me cultural history",
        "I need beginner tips",
        "What are festival patterns?",
    ),
)


TIER_RESPONSES: dict[PatternTier, ResponseTemplate] = {
    PatternTier.QUICK: ResponseTemplate(
        body="""🕐 **Perfect! With {minutes} minutes, let's create a beautiful simple Kolam!**

### ✨ Recommended pattern: 3×3 Basic Pulli Kolam
*Ideal for beginners and quick practice*

**Step 1: Create the dot grid** 🔸
- Draw 3 rows of 3 dots each (9 dots total)
- Space them evenly, about 2cm apart
- Make sure your dots are aligned straight

**Step 2: Connect with simple arcs** 🌙
- Start from the top-left dot
- Draw a gentle curve to the dot on its right
- Continue connecting the dots in each row with smooth arcs
- Keep your hand relaxed, Kolam flows with ease

**Step 3: Add vertical connections** ⬇️
- Connect the dots vertically with gentle curves
- Work from top to bottom

**Step 4: Complete the pattern** ✨
- Check that all dots are connected
- Add small flourishes at the corners if you wish
- Step back and admire your creation

**🎨 Cultural note:** this simple pattern is the building block of all Kolam art. In Tamil tradition even the smallest Kolam brings prosperity to the home.

Remember: Kolam is about joy and practice, not perfection. 🙏""",
        category=Category.TUTORIAL,
        suggestions=(
            "Show me a 4×4 pattern",
            "Cultural meaning of dots",
            "Tips for smooth lines",
            "What if I make mistakes?",
        ),
    ),
    PatternTier.STANDARD: ResponseTemplate(
        body="""⏰ **Wonderful! With {minutes} minutes, you can create a more detailed and satisfying Kolam!**

### ✨ Recommended pattern: 5×5 Symmetric Flower Kolam
*Perfect for building confidence and skills*

**Step 1: Prepare the foundation** 🔸
- Create a 5×5 grid of dots (25 dots total)
- Space them evenly, about 3cm apart
- Take your time with alignment, a good foundation makes everything easier

**Step 2: Start from the center** 🌸
- Begin at the center dot (dot #13)
- Draw four curved petals reaching toward the corner dots
- Think of a lotus blooming from the center

**Step 3: Create the outer ring** 🔄
- Connect the outer corner dots with gentle curves, moving clockwise
- Each connection should mirror the opposite side

**Step 4: Add inner details** ✨
- Connect the middle dots of each side to form inner petals
- Fill any isolated dots with graceful curves

**Step 5: Final flourishes** 🎨
- Add small decorative elements at intersection points
- Make sure every dot is part of the design

**🌺 Cultural significance:** the flower motif stands for growth, beauty and the unfolding of consciousness. This pattern is often drawn during festivals to invite blessings.

Take your time with each line, in Kolam patience creates perfection. 🙏✨""",
        category=Category.TUTORIAL,
        suggestions=(
            "Show me festival variations",
            "How to maintain symmetry",
            "Different flower patterns",
            "Cultural stories about flowers",
        ),
    ),
    PatternTier.ADVANCED: ResponseTemplate(
        body="""🕐 **Excellent! With {minutes} minutes, you can master a complex and rewarding Kolam!**

### ✨ Recommended pattern: 7×7 Interwoven Sikku Kolam
*Advanced pattern for serious practitioners*

**Step 1: Create the sacred grid** 🔸
- Draw 7 rows of 7 dots each (49 dots total)
- Space dots 3-4cm apart for comfortable working

**Step 2: Establish the central cross** ✛
- Start at the center dot
- Draw four arms reaching the middle edge dots

**Step 3: Create the interlocking loops** 🔄
- From each corner start loops that weave around the dots
- Each loop must pass its dots without breaking
- Work one quadrant at a time

**Step 4: Weave the continuous path** 🌀
- Join the loops into a single unbroken line
- Lines should weave naturally rather than cross

**Step 5: Add decorative elements** 🎨
- Small spirals at the corners, leaf motifs along the edges

**Step 6: Final verification** ✅
- Every dot is enclosed, the path has no breaks, the symmetry holds

**🔮 Deep cultural meaning:** Sikku Kolam represents the interconnectedness of all life. The unbroken line symbolizes the eternal cycle of existence.

**Historical note:** this style flourished during the Chola period, when temple architects used similar principles in their geometric designs.

Even master practitioners took years to perfect these patterns. Enjoy the meditative process. 🙏""",
        category=Category.TUTORIAL,
        suggestions=(
            "Advanced weaving techniques",
            "Temple architecture connections",
            "Mathematical principles",
            "Meditation aspects of Kolam",
        ),
    ),
    PatternTier.FULL_IMMERSION: ResponseTemplate(
        body="""🌅 **Amazing! With {minutes} minutes, you can explore the most sophisticated Kolam traditions!**

### ✨ Recommended: Master Festival Kolam Series
*Complete cultural immersion experience*

**Part 1: Morning preparation (30 mins)**
- Purify your workspace with water and flowers
- Arrange rice flour, flower petals and natural colors
- Practice breathing exercises for steady hands

**Part 2: Large pulli foundation (60 mins)**
- Create a 9×9 or 11×11 dot grid

**Part 3: Advanced sikku weaving (90 mins)**
- Build nested loops and spirals as one continuous line

**Part 4: Festival decorations (60 mins)**
- Add peacocks, lotus and mango leaf motifs
- Bring in seasonal elements such as Diwali lamps or Pongal pots

**Part 5: Double-line mastery (45 mins)**
- Draw parallel strokes to give the design depth

**Part 6: Cultural documentation (30 mins)**
- Photograph your creation and write about the experience
- Share it with family or community

**🏛️ Historical context:** royal courts of the ancient Tamil kingdoms employed master artists who spent entire days on festival floor decorations.

**🌸 Spiritual dimension:** a full-day practice is considered a form of worship. Take breaks for reflection and stay hydrated. 🙏✨""",
        category=Category.CULTURAL,
        suggestions=(
            "Festival-specific patterns",
            "Community Kolam traditions",
            "Advanced color techniques",
            "Spiritual significance",
            "Historical royal patterns",
        ),
    ),
}


INTENT_RESPONSES: dict[Intent, ResponseTemplate] = {
    Intent.HISTORY: ResponseTemplate(
        body="""📚 **The Sacred Journey of Kolam: 5,000 Years of Living Tradition**

### 🏺 Ancient foundations
The story begins in the Indus Valley Civilization, where geometric floor patterns were found in Harappa and Mohenjo-daro. These were the seeds of a practice that connects generations through sacred geometry.

### 👑 Royal patronage and renaissance
- **Chola dynasty:** royal courts raised Kolam to a fine art
- **Regional variations:** Tamil Nadu precision, Kerala florals, Karnataka innovations
- **Sacred transmission:** a mother-to-daughter legacy kept alive through dawn rituals

### 🔮 Spiritual dimensions
- Daily meditation connecting the artist to cosmic order
- Community harmony and respect for the environment
- Lessons in impermanence: created each morning, erased by evening

### 🌍 Kolam today
Mathematicians study Kolam for fractal geometry, symmetry and group theory, and computer graphics algorithms.

When you draw a Kolam you join an unbroken chain of cultural transmission. 🙏""",
        category=Category.CULTURAL,
        suggestions=(
            "Regional variations",
            "Spiritual practices",
            "Modern adaptations",
            "Family traditions",
        ),
    ),
    Intent.PATTERN_LEARNING: ResponseTemplate(
        body="""🎨 **Kolam Pattern Styles: Your Gateway to Sacred Art**

### 🔸 Pulli Kolam
- **Origin:** ancient Tamil Nadu, mentioned in Sangam literature
- **Technique:** symmetric dot grids (3×3 to 15×15) joined by flowing curves
- **Meaning:** dots are life's challenges, lines the wisdom to navigate them

### 🌀 Sikku Kolam
- **Symbolism:** unbroken loops represent life's eternal cycle
- **Technique:** lines loop around dots without lifting the hand

### 🌈 Rangoli
- **Materials:** colored rice flour, flower petals, natural dyes
- **Festival themes:** Diwali lotus patterns, Navratri motifs

### 🌸 Poo Kolam
- **Timing:** created for temple festivals and Onam
- **Materials:** jasmine for purity, marigold for prosperity

**💡 Learning tip:** start with simple 3×3 pulli patterns and grow from there. Tell me how much time you have and I'll suggest the right pattern for your session!""",
        category=Category.TUTORIAL,
        suggestions=(
            "I have 15 minutes",
            "I have 1 hour",
            "Show me beginner patterns",
            "Festival designs",
        ),
    ),
    Intent.ENCOURAGEMENT: ResponseTemplate(
        body="""💫 **Dear friend, let me share the wisdom of Kolam masters with you:**

### 🌸 The beauty of imperfection
Your Kolam doesn't need to be perfect, it needs to be yours.

### 🙏 What masters say about mistakes
- "Every mistake teaches your hands something new"
- "A Kolam drawn with love is more beautiful than a perfect one without heart"
- "The rice flour forgives, just smooth it and try again"

### ✨ Practical wisdom
- **Rice flour erases easily:** brush gently and redraw
- **Start smaller:** master 3×3 before attempting 7×7
- **Practice daily:** even 5 minutes builds muscle memory
- **Focus on flow:** smooth motion matters more than perfect shapes

### 🎨 Gentle challenge
Draw the same simple pattern for 7 days straight and watch your hands learn.

Every master was once a beginner who refused to give up. You belong in this tradition! 🙏💕""",
        category=Category.TIPS,
        suggestions=(
            "Show me easier patterns",
            "Daily practice routine",
            "How to hold the hand steady",
            "Traditional learning methods",
        ),
    ),
    Intent.TECHNIQUE_TIPS: ResponseTemplate(
        body="""🎯 **Master Techniques from Traditional Kolam Gurus**

### ✋ Hand position and movement
- Hold rice flour between thumb and index finger
- Let it flow like gentle rain, not forced drops
- Keep your wrist relaxed and let your whole arm move

### 📐 Dot placement
- Use your palm width as a natural ruler
- Start from the center and work outward

### 🌊 Smooth lines
- Move your body, not just your hand
- Draw each curve in one continuous motion

### 🧘 Meditation method
- Begin each session with three deep breaths
- Visualize the finished pattern before starting

### ⏰ Time management
- Morning practice (5-10 mins): simple patterns for mindfulness
- Evening practice (15-30 mins): new techniques
- Weekend sessions (1+ hour): complex patterns

### 🌿 Materials
- Rice flour for daily practice, rangoli powder for festivals
- Chalk or sand while you are still learning

The secret ingredient in every beautiful Kolam is love and patience. 🙏✨""",
        category=Category.TIPS,
        suggestions=(
            "Morning routine setup",
            "Advanced hand techniques",
            "Materials and tools",
            "Meditation aspects",
        ),
    ),
    Intent.GENERAL: ResponseTemplate(
        body="""🙏 **Welcome to Your Kolam Learning Journey, {name}!**

I'm delighted you're here! Kolam has brought joy, mindfulness and community connection for over 5,000 years.

### ✨ What makes Kolam special
- **Daily meditation:** each pattern is a mindful practice
- **Cultural connection:** a living link to ancient Tamil traditions
- **Mathematical beauty:** sacred geometry in everyday art

### 🎨 How I can help
- **Time-based suggestions:** tell me your available time for a matching pattern
- **Step-by-step guidance** for any skill level
- **Cultural wisdom:** stories and meanings behind each design
- **Encouragement** whatever your pace

### 💡 Quick start ideas
- "I have 15 minutes" → simple 3×3 pulli pattern
- "What's the history?" → deep cultural background
- "I need tips" → practical techniques

What aspect of this tradition calls to you today? 🌟""",
        category=Category.GENERAL,
        suggestions=(
            "I have 30 minutes",
            "Show me cultural history",
            "Beginner techniques",
            "Festival patterns",
        ),
    ),
}


LEARNING_PATHS: tuple[LearningPath, ...] = (
    LearningPath(
        "Pattern Styles",
        "Explore Pulli, Sikku, Rangoli & Poo Kolam traditions",
        "Tell me about different Kolam pattern styles and their cultural significance",
    ),
    LearningPath(
        "Creative Ideas",
        "Festival themes, seasonal patterns, personal inspiration",
        "Give me creative design ideas and inspiration for Kolam patterns",
    ),
    LearningPath(
        "Cultural Heritage",
        "5,000 years of tradition, origins, and regional variations",
        "Share the fascinating cultural history and heritage of Kolam art",
    ),
    LearningPath(
        "Learning Guide",
        "Step-by-step tutorials tailored to your skill level",
        "Guide me through learning Kolam with personalized tutorials",
    ),
    LearningPath(
        "App Features",
        "Master all tools and features for optimal learning",
        "Help me understand and use all the app features effectively",
    ),
    LearningPath(
        "Progress Tracking",
        "Document growth, set goals, celebrate achievements",
        "Help me track my progress and set learning goals",
    ),
    LearningPath(
        "Community",
        "Connect with fellow learners and master practitioners",
        "How can I connect with the Kolam learning community",
    ),
    LearningPath(
        "Inspiration & Fun",
        "Amazing facts, stories, and daily motivation",
        "Share some amazing facts and inspiration about Kolam",
    ),
)
