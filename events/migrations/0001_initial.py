import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('key', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Stable identifier of the event. Bookings reference this key.', unique=True)),
                ('name', models.CharField(help_text='Display name of the event.', max_length=200, unique=True)),
                ('slug', models.SlugField(help_text="Name used in the event's URL.", max_length=100, unique=True)),
                ('description', models.TextField(blank=True, default='', help_text='What the event is about, shown on the event page.')),
                ('start_time', models.DateTimeField(blank=True, help_text='When the event starts. Leave blank if not scheduled yet.', null=True)),
                ('location', models.CharField(blank=True, default='', help_text='Where the event takes place.', max_length=200)),
                ('is_active', models.BooleanField(default=True, help_text='Whether this event is visible on the site and open for bookings')),
            ],
            options={
                'verbose_name': 'Event',
                'verbose_name_plural': 'Events',
                'ordering': ['name'],
            },
        ),
    ]
