"""Canned documents and responses served in fixture (demo) mode."""

DEMO_DOCUMENTS: list[dict] = [
    {
        "id": "demo-1",
        "content": (
            "The AI/ML Flowise Platform is a comprehensive solution for building and deploying "
            "AI workflows. It integrates with various AI services and provides a visual interface "
            "for creating complex AI applications."
        ),
        "metadata": {"source": "demo", "title": "Platform Overview"},
    },
    {
        "id": "demo-2",
        "content": (
            "Machine Learning models can be trained using TensorFlow.js for client-side inference. "
            "This allows for real-time predictions without server round trips, improving user "
            "experience and reducing latency."
        ),
        "metadata": {"source": "demo", "title": "ML Capabilities"},
    },
    {
        "id": "demo-3",
        "content": (
            "RAG (Retrieval-Augmented Generation) combines information retrieval with language "
            "generation. It searches through documents to find relevant context and uses that "
            "information to generate accurate, contextual responses."
        ),
        "metadata": {"source": "demo", "title": "RAG Technology"},
    },
    {
        "id": "demo-4",
        "content": (
            "The platform supports various authentication methods including OAuth 2.0, SSO, and "
            "guest access. Security is implemented at multiple layers with proper token validation "
            "and session management."
        ),
        "metadata": {"source": "demo", "title": "Security Features"},
    },
]

# Checked in order; the first keyword contained in the lowercased question wins.
DEMO_ANSWERS: dict[str, str] = {
    "what is rag": (
        "RAG (Retrieval-Augmented Generation) is a technique that combines information retrieval "
        "with text generation. It searches through a knowledge base to find relevant documents and "
        "uses that information to generate accurate, contextual responses."
    ),
    "how does machine learning work": (
        "Machine Learning works by training algorithms on data to recognize patterns and make "
        "predictions. In this platform, we use TensorFlow.js for client-side ML, allowing real-time "
        "inference without server dependencies."
    ),
    "what is flowise": (
        "Flowise is a visual tool for building AI workflows and applications. It provides a "
        "drag-and-drop interface to create complex AI pipelines without extensive coding."
    ),
    "authentication": (
        "The platform supports multiple authentication methods including OAuth 2.0, SSO, and guest "
        "access. Security is implemented with proper token validation and session management."
    ),
}

DEFAULT_ANSWER_TEMPLATE = """Based on the available knowledge base, I can provide information about: {question}

The AI/ML Flowise Platform integrates various AI technologies including RAG, machine learning models, and visual workflow builders. It's designed for building comprehensive AI applications with modern security and scalability features.

This platform supports various use cases from data analysis to workflow automation. What specific aspect would you like to know more about?"""

DEMO_SUMMARY = """Summary of Available Documents:

• Platform Overview: The AI/ML Flowise Platform provides comprehensive AI workflow capabilities
• ML Capabilities: Client-side machine learning using TensorFlow.js for real-time inference
• RAG Technology: Advanced retrieval-augmented generation for contextual responses
• Security Features: Multi-layer authentication with OAuth 2.0 and SSO support

The platform integrates modern AI technologies with user-friendly interfaces and enterprise-grade security. It's designed for building scalable AI applications with visual workflow management."""

DEMO_AGENT_REPLIES: dict[str, str] = {
    "hi": "Hello! How can I help you with your AI/ML project today?",
    "hello": "Hi there! Welcome to the AI/ML platform. What would you like to work on?",
    "help": (
        "I can assist you with code analysis, data insights, document processing, ML "
        "recommendations, and workflow automation. What interests you?"
    ),
    "code": (
        "I can help with code review, optimization, debugging, algorithm recommendations, and "
        "explaining complex sections. Share your code!"
    ),
    "data": (
        "Great! I can help with data exploration, preprocessing, visualization, statistical "
        "analysis, and feature engineering. What data are you working with?"
    ),
    "machine learning": (
        "Excellent! I can assist with model selection, hyperparameter tuning, feature engineering, "
        "evaluation, and deployment strategies. What is your ML challenge?"
    ),
    "error": (
        "I can help debug that! Let me examine the error, check dependencies, review logic, and "
        "suggest fixes. Share the error details."
    ),
    "optimize": (
        "I would love to help optimize your solution! I look for algorithm efficiency, code "
        "structure, resource usage, and caching strategies. What needs optimization?"
    ),
    "recommend": (
        "I can provide recommendations for tools, libraries, architecture patterns, best practices, "
        "and learning resources. What area interests you?"
    ),
}

DEFAULT_AGENT_REPLY_TEMPLATE = (
    "That's an interesting question about \"{message}\". I'm here to help with your AI/ML "
    "development needs. I can assist with technical analysis, solution design, code review, and "
    "learning support. What are you trying to accomplish?"
)
