from langchain_core.prompts import ChatPromptTemplate


system_template = """
    You are an expert at analyzing YouTube video transcripts.
    Read the transcript and describe:
    1. The main topic/subject of the video
    2. Key points and important insights
    3. Main takeaways and learnings

    Respond with ONLY a JSON object, no markdown and no extra text, in this shape:
    {{"topic": "<main topic>", "keyPoints": ["<point>", "<point>"], "summary": "<concise summary>"}}
    """

human_template = """
    Transcript:
    {transcript}
    """

analysis_prompt = ChatPromptTemplate.from_messages([
    ("system", system_template),
    ("human", human_template),
])
