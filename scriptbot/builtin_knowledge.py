"""Built-in knowledge tables: instant answers without any search"""

# ═══════════════════════════════════════════════════════════════════════════════
# § 1  STOP WORDS (removed from a question before lookup)
# ═══════════════════════════════════════════════════════════════════════════════

STOP_WORDS = frozenset({
    'a', 'an', 'the', 'is', 'are', 'was', 'were', 'be', 'of', 'to', 'in', 'on',
    'at', 'for', 'and', 'or', 'with', 'what', 'whats', 'who', 'whos', 'where',
    'when', 'how', 'does', 'do', 'did', 'tell', 'me', 'about', 'explain',
    'please', 'can', 'could', 'you', 'i', 'my', 'your', 'it', 'its', 'this',
    'that', 'some', 'know', 'something',
})

# ═══════════════════════════════════════════════════════════════════════════════
# § 2  DEFINITIONS ("what is", "tell me about", "explain")
# ═══════════════════════════════════════════════════════════════════════════════

DEFINITIONS = {
    'photosynthesis': (
        "Photosynthesis is the process by which green plants, algae and some bacteria "
        "use sunlight, water and carbon dioxide to produce glucose and oxygen. "
        "It takes place mainly in the chloroplasts of plant cells. 🌱"
    ),
    'artificial intelligence': (
        "Artificial intelligence (AI) is the field of computer science focused on building "
        "systems that perform tasks normally requiring human intelligence, such as "
        "understanding language, recognizing images and making decisions. 🤖"
    ),
    'machine learning': (
        "Machine learning is a branch of artificial intelligence in which computers learn "
        "patterns from data and improve at a task without being explicitly programmed "
        "for every case."
    ),
    'gravity': (
        "Gravity is the force by which objects with mass attract one another. On Earth it "
        "accelerates falling objects at about 9.8 m/s², and it keeps the planets in orbit "
        "around the Sun. 🌍"
    ),
    'black hole': (
        "A black hole is a region of space where gravity is so strong that nothing, not "
        "even light, can escape. Black holes form when massive stars collapse at the end "
        "of their lives. 🕳️"
    ),
    'evolution': (
        "Evolution is the change in the inherited traits of populations over successive "
        "generations. Natural selection, described by Charles Darwin, is one of its main "
        "mechanisms. 🦎"
    ),
    'democracy': (
        "Democracy is a system of government in which power rests with the people, who "
        "rule either directly or through freely elected representatives. 🗳️"
    ),
    'blockchain': (
        "A blockchain is a distributed, append-only ledger in which records are grouped "
        "into blocks that are cryptographically linked, making past entries very hard to "
        "alter. It is the technology behind cryptocurrencies like Bitcoin. ⛓️"
    ),
    'quantum computing': (
        "Quantum computing uses quantum bits (qubits), which can exist in superpositions "
        "of 0 and 1, to solve certain problems far faster than classical computers. ⚛️"
    ),
    'climate change': (
        "Climate change refers to long-term shifts in global temperatures and weather "
        "patterns. Since the 1800s, human activities such as burning fossil fuels have "
        "been the main driver. 🌡️"
    ),
    'internet': (
        "The internet is a global network of interconnected computers that communicate "
        "using standardized protocols such as TCP/IP. It carries services like the World "
        "Wide Web, email and streaming. 🌐"
    ),
    'renewable energy': (
        "Renewable energy comes from sources that are naturally replenished, such as "
        "sunlight, wind, rain, tides and geothermal heat. ♻️"
    ),
    'ecosystem': (
        "An ecosystem is a community of living organisms interacting with each other and "
        "with their physical environment, such as a forest, a coral reef or a pond."
    ),
    'inflation': (
        "Inflation is the rate at which the general level of prices for goods and services "
        "rises, reducing the purchasing power of money over time. 💸"
    ),
    'cloud computing': (
        "Cloud computing is the on-demand delivery of computing resources such as servers, "
        "storage and databases over the internet, typically with pay-as-you-go pricing. ☁️"
    ),
    'mitochondria': (
        "Mitochondria are organelles inside cells that generate most of the chemical "
        "energy (ATP) needed to power the cell's biochemical reactions. They are often "
        "called the powerhouse of the cell. 🔋"
    ),
    'relativity': (
        "Relativity refers to Albert Einstein's theories of special relativity (1905) and "
        "general relativity (1915), which describe how space, time and gravity are linked. "
        "Its most famous result is E = mc²."
    ),
    'encryption': (
        "Encryption is the process of converting information into a coded form so that "
        "only parties holding the right key can read it. 🔐"
    ),
    'capital of france': "The capital of France is Paris. 🇫🇷",
    'periodic table': (
        "The periodic table is a chart that organizes all known chemical elements by "
        "atomic number, electron configuration and recurring chemical properties. 🧪"
    ),
}

# ═══════════════════════════════════════════════════════════════════════════════
# § 3  PEOPLE ("who is")
# ═══════════════════════════════════════════════════════════════════════════════

PEOPLE = {
    'albert einstein': (
        "Albert Einstein (1879–1955) was a German-born theoretical physicist best known "
        "for the theory of relativity and the equation E = mc². He won the 1921 Nobel "
        "Prize in Physics."
    ),
    'isaac newton': (
        "Sir Isaac Newton (1643–1727) was an English mathematician and physicist who "
        "formulated the laws of motion and universal gravitation, and co-invented calculus."
    ),
    'marie curie': (
        "Marie Curie (1867–1934) was a Polish-French physicist and chemist who pioneered "
        "research on radioactivity. She was the first person to win Nobel Prizes in two "
        "different sciences."
    ),
    'ada lovelace': (
        "Ada Lovelace (1815–1852) was an English mathematician who wrote what is considered "
        "the first computer program, for Charles Babbage's Analytical Engine. 💻"
    ),
    'alan turing': (
        "Alan Turing (1912–1954) was a British mathematician and computer scientist who "
        "formalized the concept of computation and helped break the Enigma code during "
        "World War II."
    ),
    'leonardo da vinci': (
        "Leonardo da Vinci (1452–1519) was an Italian Renaissance polymath, painter of the "
        "Mona Lisa and The Last Supper, and an inventor far ahead of his time. 🎨"
    ),
    'nikola tesla': (
        "Nikola Tesla (1856–1943) was a Serbian-American inventor and engineer best known "
        "for developing the alternating current (AC) electrical system. ⚡"
    ),
    'william shakespeare': (
        "William Shakespeare (1564–1616) was an English playwright and poet, author of "
        "Hamlet, Romeo and Juliet and Macbeth, widely regarded as the greatest writer in "
        "the English language. 🎭"
    ),
}

# ═══════════════════════════════════════════════════════════════════════════════
# § 4  EVENTS ("when did"), matched on the first two words of the key
# ═══════════════════════════════════════════════════════════════════════════════

EVENTS = {
    'humans land on the moon': (
        "Humans first landed on the Moon on July 20, 1969, during NASA's Apollo 11 "
        "mission. Neil Armstrong and Buzz Aldrin walked on the surface. 🌕"
    ),
    'world war ii end': (
        "World War II ended in 1945: in Europe on May 8 (V-E Day) and in the Pacific "
        "on September 2, when Japan formally surrendered."
    ),
    'berlin wall fall': (
        "The Berlin Wall fell on November 9, 1989, opening the border between East and "
        "West Berlin and leading to German reunification in 1990."
    ),
    'titanic sink': (
        "The RMS Titanic sank on April 15, 1912, after striking an iceberg on its maiden "
        "voyage from Southampton to New York. 🚢"
    ),
    'dinosaurs go extinct': (
        "The non-avian dinosaurs went extinct about 66 million years ago, most likely "
        "after a massive asteroid struck what is now Mexico's Yucatán Peninsula. 🦖"
    ),
    'french revolution happen': (
        "The French Revolution began in 1789 with the storming of the Bastille and lasted "
        "until 1799, when Napoleon Bonaparte seized power."
    ),
}

# ═══════════════════════════════════════════════════════════════════════════════
# § 5  PROCESSES ("how does"), matched on the first word of the key
# ═══════════════════════════════════════════════════════════════════════════════

PROCESSES = {
    'photosynthesis work': (
        "Photosynthesis works in two stages: the light-dependent reactions capture "
        "sunlight to make ATP and NADPH, and the Calvin cycle uses them to turn carbon "
        "dioxide into glucose. 🌿"
    ),
    'vaccines work': (
        "Vaccines work by exposing the immune system to a harmless piece or weakened form "
        "of a pathogen, so it learns to recognize and fight the real infection quickly. 💉"
    ),
    'airplanes fly': (
        "Airplanes fly because their wings are shaped to create lift: air moving over and "
        "under the wing produces a pressure difference that pushes the plane upward, while "
        "engines provide thrust. ✈️"
    ),
    'rainbows form': (
        "Rainbows form when sunlight enters raindrops, bends (refracts), reflects off the "
        "back of the drop and splits into its component colors. 🌈"
    ),
    'heart pump blood': (
        "The heart pumps blood by rhythmic contractions: the right side sends blood to the "
        "lungs to pick up oxygen, and the left side pushes oxygen-rich blood to the rest of "
        "the body. ❤️"
    ),
    'gps work': (
        "GPS works by measuring the time signals take to travel from several satellites "
        "to a receiver, then using those distances to calculate the receiver's position. 🛰️"
    ),
    'wifi work': (
        "Wi-Fi works by transmitting data between devices and a router using radio waves, "
        "usually in the 2.4 GHz and 5 GHz frequency bands. 📶"
    ),
}

# ═══════════════════════════════════════════════════════════════════════════════
# § 6  LOCATIONS ("where is")
# ═══════════════════════════════════════════════════════════════════════════════

LOCATIONS = {
    'eiffel tower': "The Eiffel Tower is in Paris, France, on the Champ de Mars near the Seine. 🗼",
    'mount everest': (
        "Mount Everest is in the Himalayas, on the border between Nepal and the Tibet "
        "Autonomous Region of China. At 8,849 m it is the highest mountain on Earth. 🏔️"
    ),
    'great wall of china': (
        "The Great Wall of China stretches across northern China, from Shanhaiguan in the "
        "east to Jiayuguan in the west."
    ),
    'statue of liberty': (
        "The Statue of Liberty stands on Liberty Island in New York Harbor, United States. 🗽"
    ),
    'amazon rainforest': (
        "The Amazon rainforest covers much of the Amazon basin in South America, mostly in "
        "Brazil, with parts in Peru, Colombia and six other countries. 🌳"
    ),
    'sahara desert': (
        "The Sahara Desert covers most of North Africa, stretching from the Atlantic Ocean "
        "to the Red Sea. 🏜️"
    ),
    'machu picchu': "Machu Picchu is an Inca citadel in the Andes Mountains of southern Peru. ⛰️",
}
