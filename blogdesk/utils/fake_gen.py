from faker import Faker
from faker.providers import BaseProvider


class BlogProvider(BaseProvider):
    """
    博客演示数据生成器
    生成像样的文章标题、标签和评论
    """

    title_templates = [
        'How to {verb} {topic} in {year}',
        '{number} Lessons I Learned About {topic}',
        'A Practical Guide to {topic}',
        'Why {topic} Matters More Than Ever',
        'The Beginner\'s Handbook to {topic}',
        '{topic}: Myths and Realities',
    ]

    verbs = ['Master', 'Learn', 'Scale', 'Simplify', 'Automate', 'Rethink']

    topics = [
        'Remote Work', 'Content Strategy', 'Python Tooling', 'Team Rituals',
        'Personal Finance', 'Design Systems', 'Morning Routines', 'Product Launches',
        'Static Sites', 'Healthy Habits', 'Open Source', 'Customer Research',
    ]

    blog_tags = [
        'productivity', 'writing', 'career', 'python', 'design', 'startup',
        'wellness', 'tutorial', 'opinion', 'tools', 'marketing', 'travel',
    ]

    def post_title(self):
        template = self.random_element(self.title_templates)
        return template.format(
            verb=self.random_element(self.verbs),
            topic=self.random_element(self.topics),
            year=self.random_int(2022, 2026),
            number=self.random_int(3, 12),
        )

    def post_tags(self):
        return self.random_elements(self.blog_tags, length=self.random_int(1, 4), unique=True)

    def post_body(self):
        """带标题与段落的 Markdown 正文"""
        sections = []
        for _ in range(self.random_int(2, 4)):
            sections.append(f"## {self.generator.sentence(nb_words=4).rstrip('.')}")
            sections.append(self.generator.paragraph(nb_sentences=6))
        return '\n\n'.join(sections)


# 初始化 Faker 并添加自定义 Provider
fake = Faker('en_US')
fake.add_provider(BlogProvider)
