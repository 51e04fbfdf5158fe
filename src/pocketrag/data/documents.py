"""TuristAgent knowledge base"""

DOCUMENTS = [
    # Company
    "Nuestra empresa fue fundada en 2020 en Monterrey, Nuevo León, México.",
    "Ofrecemos servicios de desarrollo iOS con Swift y SwiftUI.",
    "Ofrecemos servicios de desarrollo Android con Kotlin y Jetpack Compose.",
    "Horario de atención: Lunes a Viernes de 9:00 AM a 6:00 PM CST.",
    "Contamos con un equipo de 15 desarrolladores senior especializados.",
    "Usamos metodologías ágiles con sprints de 2 semanas.",
    "Los proyectos típicamente tardan entre 3 a 6 meses.",
    "Implementamos MVVM y Clean Architecture en nuestros proyectos.",
    "Ofrecemos planes de mantenimiento mensual con actualizaciones y fixes.",
    "Precios: apps básicas desde $50,000 MXN, intermedias $150,000 MXN.",

    # TuristAgent
    "TuristAgent es una aplicación móvil para turistas que visitan México.",
    "La app incluye un escáner de códigos QR para obtener información sobre lugares turísticos.",
    "TuristAgent proporciona guías turísticas interactivas y recomendaciones personalizadas.",
    "La aplicación funciona offline para áreas con poca conectividad.",
    "Incluye mapas detallados de las principales ciudades turísticas de México.",
    "TuristAgent ofrece traducciones automáticas a múltiples idiomas.",
    "La app cuenta con un sistema de recomendaciones basado en preferencias del usuario.",
    "Incluye información sobre eventos culturales y festivales locales.",
    "TuristAgent proporciona información sobre transporte público y rutas turísticas.",
    "La aplicación incluye reseñas y calificaciones de otros turistas.",

    # Technical
    "La aplicación está desarrollada en Swift para iOS y SwiftUI para la interfaz.",
    "Utiliza Core ML para procesamiento de imágenes y reconocimiento de códigos QR.",
    "Implementa MapKit para funcionalidad de mapas y geolocalización.",
    "Usa UserDefaults para almacenamiento local de preferencias del usuario.",
    "La app está optimizada para iOS 15.0 y versiones superiores.",
    "Implementa un sistema de caché para contenido offline.",
    "Utiliza Combine framework para manejo reactivo de datos.",
    "La arquitectura sigue el patrón MVVM con separación clara de responsabilidades.",
    "Implementa tests unitarios y de integración para garantizar calidad.",
    "La app está disponible en App Store con calificación 4.8 estrellas.",
]

# Search-only demo
DEMO_QUERIES = [
    "¿Qué es TuristAgent?",
    "tecnologías de desarrollo",
    "precios y costos",
    "funcionalidad offline",
    "características para turistas",
    "horarios de atención",
    "metodologías de trabajo",
    "arquitectura de la app",
]

# Full question-answering demo
DEMO_QUESTIONS = [
    "¿Qué es TuristAgent?",
    "¿En qué tecnologías está desarrollada la app?",
    "¿Cuáles son los precios de desarrollo?",
    "¿La app funciona offline?",
    "¿Qué funcionalidades tiene para turistas?",
]
