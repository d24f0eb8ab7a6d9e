SYSTEM_PROMPT = (
    "You are an expert at creating engaging, educational YouTube Shorts content "
    "for children. Always respond with valid JSON only."
)


class PromptBuilder:

    @staticmethod
    def system_prompt() -> str:
        return SYSTEM_PROMPT

    @staticmethod
    def build_short_prompt(topic: str, duration: int) -> str:
        """
        The single user instruction sent to the remote model.
        Pure function of (topic, duration); the output schema is spelled out
        field for field so the reply parses straight into ShortContent.
        """
        prompt = f"""
Create a YouTube Shorts script for kids about "{topic}".

Requirements:
- Total duration: {duration} seconds
- Target audience: Kids ages 3-8
- Educational and entertaining
- Bright, colorful, engaging content
- 3-5 scenes
- Each scene should have clear visual descriptions, narration, and text overlays
- Keep language simple and fun

Return a JSON object with this exact structure:
{{
  "title": "Catchy title for the short",
  "description": "YouTube video description with relevant hashtags",
  "scenes": [
    {{
      "sceneNumber": 1,
      "duration": 10,
      "visualDescription": "Detailed description of what appears on screen",
      "narration": "What the narrator says",
      "textOverlay": "Large text that appears on screen"
    }}
  ],
  "totalDuration": {duration}
}}
"""

        return prompt.strip()
