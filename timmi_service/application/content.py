"""
Static page content served as page props
"""

SITE_STATS = {
    "total_users": 8547,
    "total_articles": 1234,
    "total_services": 856,
}

FAQ_CATEGORIES = [
    {
        "id": "general",
        "title": "Général",
        "questions": [
            {
                "id": "what-is-timmi",
                "question": "Qu'est-ce que TIMMI ?",
                "answer": "TIMMI est une plateforme de mise en relation entre parents et professeurs particuliers. Nous facilitons la recherche, la réservation et le paiement de cours particuliers pour tous les niveaux et toutes les matières.",
            },
            {
                "id": "how-it-works",
                "question": "Comment fonctionne la plateforme ?",
                "answer": "1. Recherchez un professeur par matière, niveau et localisation\n2. Consultez son profil, ses avis et ses disponibilités\n3. Réservez un créneau qui vous convient\n4. Payez en ligne de manière sécurisée\n5. Suivez vos cours et donnez votre avis",
            },
            {
                "id": "who-can-use",
                "question": "Qui peut utiliser TIMMI ?",
                "answer": "TIMMI s'adresse aux parents qui cherchent des cours particuliers pour leurs enfants, aux étudiants qui souhaitent prendre des cours directement, et aux professeurs qualifiés qui veulent enseigner.",
            },
            {
                "id": "subjects-available",
                "question": "Quelles matières sont disponibles ?",
                "answer": "Nous proposons toutes les matières scolaires : Mathématiques, Français, Anglais, Physique, Chimie, Histoire, Géographie, Sciences, et bien d'autres. Chaque professeur peut enseigner plusieurs matières.",
            },
        ],
    },
    {
        "id": "booking",
        "title": "Réservation et Paiement",
        "questions": [
            {
                "id": "how-to-book",
                "question": "Comment réserver un cours ?",
                "answer": "C'est très simple ! Utilisez notre moteur de recherche pour trouver un professeur, consultez son profil et ses créneaux disponibles, puis sélectionnez celui qui vous convient. Le paiement se fait en ligne de manière sécurisée.",
            },
            {
                "id": "payment-methods",
                "question": "Quels sont les moyens de paiement acceptés ?",
                "answer": "Nous acceptons les cartes bancaires (Visa, Mastercard, American Express), PayPal, et les virements bancaires. Tous les paiements sont sécurisés par un cryptage SSL 256 bits.",
            },
            {
                "id": "cancellation-policy",
                "question": "Puis-je annuler ou reporter un cours ?",
                "answer": "Oui, vous pouvez annuler ou reporter un cours jusqu'à 24h avant le début sans frais. Pour les annulations de dernière minute, des frais peuvent s'appliquer selon les conditions du professeur.",
            },
            {
                "id": "refund-policy",
                "question": "Quelle est votre politique de remboursement ?",
                "answer": "Si vous n'êtes pas satisfait de votre premier cours, nous vous remboursons intégralement. Pour les autres cas, les remboursements sont traités au cas par cas selon nos conditions générales.",
            },
        ],
    },
    {
        "id": "teachers",
        "title": "Professeurs",
        "questions": [
            {
                "id": "teacher-qualification",
                "question": "Comment sont vérifiés les professeurs ?",
                "answer": "Tous nos professeurs sont vérifiés : nous vérifions leurs diplômes, leur expérience et leurs compétences. Ils doivent également passer un entretien et fournir des références avant d'être acceptés sur la plateforme.",
            },
            {
                "id": "teacher-rating",
                "question": "Comment fonctionne le système d'avis ?",
                "answer": "Après chaque cours, parents et étudiants peuvent noter le professeur et laisser un commentaire. Ces avis sont publics et aident les autres utilisateurs à faire leur choix.",
            },
            {
                "id": "teacher-availability",
                "question": "Comment connaître les disponibilités d'un professeur ?",
                "answer": "Chaque professeur met à jour son calendrier en temps réel. Vous pouvez voir ses créneaux disponibles directement sur son profil et réserver en quelques clics.",
            },
            {
                "id": "become-teacher",
                "question": "Comment devenir professeur sur TIMMI ?",
                "answer": "Rendez-vous sur notre page \"Devenir professeur\", remplissez le formulaire d'inscription, envoyez vos diplômes et références. Notre équipe examinera votre candidature et vous contactera dans les 48h.",
            },
        ],
    },
    {
        "id": "technical",
        "title": "Technique et Support",
        "questions": [
            {
                "id": "platform-requirements",
                "question": "Quels sont les prérequis techniques ?",
                "answer": "TIMMI fonctionne sur tous les navigateurs modernes (Chrome, Firefox, Safari, Edge) et sur tous les appareils (ordinateur, tablette, smartphone). Une connexion internet stable est recommandée pour les cours en ligne.",
            },
            {
                "id": "online-classes",
                "question": "Comment se déroulent les cours en ligne ?",
                "answer": "Les cours en ligne se déroulent via notre plateforme intégrée avec vidéo, chat et tableau blanc interactif. Vous recevez un lien de connexion par email avant chaque cours.",
            },
            {
                "id": "data-security",
                "question": "Mes données sont-elles sécurisées ?",
                "answer": "Absolument ! Nous utilisons un cryptage SSL 256 bits pour toutes les données et respectons le RGPD. Vos informations personnelles ne sont jamais partagées avec des tiers sans votre consentement.",
            },
            {
                "id": "contact-support",
                "question": "Comment contacter le support ?",
                "answer": "Vous pouvez nous contacter par email à support@timmi.fr, par téléphone au 01 23 45 67 89, ou via le chat en ligne disponible 7j/7. Notre équipe répond dans les 24h.",
            },
        ],
    },
]

PRICING_PLANS = [
    {
        "id": "single",
        "name": "Cours à l'unité",
        "description": "Parfait pour essayer ou des besoins ponctuels",
        "price": 25,
        "currency": "GNF",
        "period": "par cours",
        "popular": False,
        "features": [
            "Cours d'1h avec professeur qualifié",
            "Toutes matières disponibles",
            "Tous niveaux (primaire à supérieur)",
            "Réservation flexible",
            "Paiement sécurisé",
            "Support client inclus",
        ],
        "limitations": ["Pas de réduction de volume"],
        "cta": "Réserver un cours",
        "cta_link": "/search/teachers",
    },
    {
        "id": "pack5",
        "name": "Pack 5 cours",
        "description": "Idéal pour un suivi régulier sur quelques semaines",
        "price": 115,
        "original_price": 125,
        "currency": "GNF",
        "period": "5 cours",
        "popular": True,
        "features": [
            "5 cours d'1h chacun",
            "Toutes matières disponibles",
            "Tous niveaux (primaire à supérieur)",
            "Réservation flexible",
            "Paiement sécurisé",
            "Support client prioritaire",
            "Historique des cours",
        ],
        "limitations": [],
        "cta": "Choisir ce pack",
        "cta_link": "/search/teachers?pack=5",
    },
    {
        "id": "pack10",
        "name": "Pack 10 cours",
        "description": "Le plus économique pour un suivi à long terme",
        "price": 220,
        "original_price": 250,
        "currency": "GNF",
        "period": "10 cours",
        "popular": False,
        "features": [
            "10 cours d'1h chacun",
            "Toutes matières disponibles",
            "Tous niveaux (primaire à supérieur)",
            "Réservation flexible",
            "Paiement sécurisé",
            "Support client prioritaire",
            "Historique des cours",
            "Statistiques de progression",
            "Rapport mensuel personnalisé",
        ],
        "limitations": [],
        "cta": "Choisir ce pack",
        "cta_link": "/search/teachers?pack=10",
    },
]

PRICING_FAQ = [
    {
        "question": "Y a-t-il des frais cachés ?",
        "answer": "Non, nos tarifs sont totalement transparents. Le prix affiché est le prix final que vous payez, sans frais supplémentaires.",
    },
    {
        "question": "Puis-je changer de formule à tout moment ?",
        "answer": "Oui, vous pouvez passer d'une formule à l'autre selon vos besoins. Les cours non utilisés sont conservés dans votre compte.",
    },
    {
        "question": "Que se passe-t-il si je ne suis pas satisfait ?",
        "answer": "Nous offrons une garantie de satisfaction. Si vous n'êtes pas satisfait de votre premier cours, nous vous remboursons intégralement.",
    },
    {
        "question": "Les packs ont-ils une durée de validité ?",
        "answer": "Oui, les packs sont valables 6 mois à partir de la date d'achat. Cela vous laisse le temps de planifier vos cours selon vos disponibilités.",
    },
]

CONTACT_DETAILS = {
    "email": "support@timmi.fr",
    "phone": "01 23 45 67 89",
    "response_time": "24h",
}

STATIC_PAGES = {
    "about": {"title": "À propos de nous"},
    "contact": {"title": "Nous contacter", "contact": CONTACT_DETAILS},
    "blog": {"title": "Blog", "posts": []},
    "privacy": {"title": "Politique de confidentialité"},
    "terms": {"title": "Conditions d'utilisation"},
    "notifications": {"title": "Notifications", "notifications": []},
}
